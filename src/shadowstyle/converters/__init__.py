from shadowstyle.converters.attribute import AttributeConverter
from shadowstyle.converters.base import Converter, ConverterResult, matches
from shadowstyle.converters.classname import ClassConverter
from shadowstyle.converters.id import IdConverter
from shadowstyle.converters.pseudo import FOCUS_RING, PseudoConverter
from shadowstyle.converters.slotted import SlotConverter

__all__ = [
    "Converter",
    "ConverterResult",
    "matches",
    "AttributeConverter",
    "ClassConverter",
    "SlotConverter",
    "IdConverter",
    "PseudoConverter",
    "FOCUS_RING",
]
