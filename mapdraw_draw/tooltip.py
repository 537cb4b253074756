"""
Tooltip augmentation for toolkit-rendered draw controls.

The drawing toolkit renders its toolbar buttons with a native `title`
tooltip. These helpers replace it with a custom tooltip node that can be
re-texted later (localisation, "cancel" while a draw mode is active).

UI tree: xml.etree.ElementTree elements. ElementTree keeps no parent
pointers, so the parent of a control is looked up under the tree root the
caller passes in. Controls are moved, never copied: the element object
(and whatever is bound to it) stays the same.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from mapdraw_draw.config import DRAW_ELEMENT_OPTIONS
from mapdraw_layers import LayerKind
from mapdraw_logging import LogEvent, create_logger

logger = create_logger("tooltip")

TOOLTIP_CLASS = "control-tooltip"
TOOLTIP_CONTENT_CLASS = "control-tooltip-content"


@dataclass
class DrawControlElements:
    """Toolbar button of one kind and the tooltip node wrapped around it."""

    button: Optional[ET.Element]
    tooltip_content: Optional[ET.Element]


def _parent_of(root: Optional[ET.Element], element: ET.Element) -> Optional[ET.Element]:
    if root is None:
        return None
    for candidate in root.iter():
        for child in candidate:
            if child is element:
                return candidate
    return None


def find_control(root: Optional[ET.Element], class_name: str) -> Optional[ET.Element]:
    """
    First element under root whose class attribute holds class_name.

    Returns None when the control has not been rendered (yet).
    """
    if root is None:
        return None
    for element in root.iter():
        if class_name in element.get("class", "").split():
            return element
    return None


def augment_tooltip(
    element: Optional[ET.Element],
    tooltip_text: str,
    root: Optional[ET.Element],
) -> Optional[ET.Element]:
    """
    Wrap a control element with a custom tooltip.

    Resulting structure, in place of the element:

        <div class="control-tooltip">
            <div class="control-tooltip-content">tooltip_text</div>
            <element .../>
        </div>

    Args:
        element: Control element, or None if not rendered yet
        tooltip_text: Literal tooltip text
        root: Tree the element lives in, used to find its parent. Pass None
            for a detached element; it is still wrapped and the wrapper is
            detached too.

    Returns:
        The tooltip content element, or None when element is None

    Raises:
        ValueError: If root is given but the element is not under it
    """
    if element is None:
        logger.debug(
            event=LogEvent.TOOLTIP_CONTROL_MISSING,
            message="Control element not rendered, tooltip skipped",
            metadata={'tooltip_text': tooltip_text}
        )
        return None

    parent = _parent_of(root, element)
    if root is not None and parent is None and element is not root:
        raise ValueError("Control element is not under the given root")

    element.attrib.pop("title", None)

    tooltip = ET.Element("div", {"class": TOOLTIP_CLASS})
    tooltip_content = ET.SubElement(tooltip, "div", {"class": TOOLTIP_CONTENT_CLASS})
    tooltip_content.text = tooltip_text

    if parent is not None:
        index = list(parent).index(element)
        # Tail text belongs after the control in the parent, not inside the wrapper
        tooltip.tail, element.tail = element.tail, None
        parent.remove(element)
        parent.insert(index, tooltip)

    tooltip.append(element)

    logger.debug(
        event=LogEvent.TOOLTIP_AUGMENTED,
        message="Control wrapped with tooltip",
        metadata={'class': element.get("class", ""), 'attached': parent is not None}
    )
    return tooltip_content


def set_tooltip_text(tooltip_content: Optional[ET.Element], text: str) -> None:
    """Replace the text of a tooltip content node; None is ignored."""
    if tooltip_content is not None:
        tooltip_content.text = text


def tooltip_text_key(kind: LayerKind, drawing: bool = False) -> str:
    """Translation key for a kind's tooltip; the cancel key while drawing."""
    options = DRAW_ELEMENT_OPTIONS[kind]
    return options.tooltip_cancel_text_key if drawing else options.tooltip_text_key


def augment_draw_controls(
    root: Optional[ET.Element],
    translate: Callable[[str], str],
    kinds: Iterable[LayerKind] = tuple(LayerKind),
) -> Dict[LayerKind, DrawControlElements]:
    """
    Add custom tooltips to the toolbar button of each kind.

    Args:
        root: Rendered toolbar (or whole page) tree
        translate: Maps a translation key to display text
        kinds: Kinds whose buttons are augmented

    Returns:
        Button and tooltip content per kind; both None for a button that
        is not rendered
    """
    controls: Dict[LayerKind, DrawControlElements] = {}
    for kind in kinds:
        button = find_control(root, DRAW_ELEMENT_OPTIONS[kind].button_class)
        content = augment_tooltip(button, translate(tooltip_text_key(kind)), root)
        controls[kind] = DrawControlElements(button=button, tooltip_content=content)
    return controls
