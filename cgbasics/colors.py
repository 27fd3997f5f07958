"""A table of named RGB colours with components in the range 0..1."""

from __future__ import annotations

from enum import IntEnum


class NamedColor(IntEnum):
    """Index of a colour in the table."""

    AQUAMARINE = 0
    BLUE_VIOLET = 1
    BROWN = 2
    CADET_BLUE = 3
    CORAL = 4
    CORNFLOWER_BLUE = 5
    DARK_GREEN = 6
    DARK_OLIVE_GREEN = 7
    DARK_ORCHID = 8
    DARK_SLATE_BLUE = 9
    DARK_SLATE_GRAY = 10
    DARK_SLATE_GREY = 11
    DARK_TURQUOISE = 12
    FIREBRICK = 13
    FOREST_GREEN = 14
    GOLD = 15
    GOLDENROD = 16
    GREEN_YELLOW = 17
    INDIAN_RED = 18
    KHAKI = 19
    LIGHT_BLUE = 20
    LIGHT_STEEL_BLUE = 21
    LIME_GREEN = 22
    MAROON = 23
    MEDIUM_AQUAMARINE = 24
    MEDIUM_BLUE = 25
    MEDIUM_FOREST_GREEN = 26
    MEDIUM_GOLDENROD = 27
    MEDIUM_ORCHID = 28
    MEDIUM_SEA_GREEN = 29
    MEDIUM_SLATE_BLUE = 30
    MEDIUM_SPRING_GREEN = 31
    MEDIUM_TURQUOISE = 32
    MEDIUM_VIOLET_RED = 33
    MIDNIGHT_BLUE = 34
    NAVY = 35
    NAVY_BLUE = 36
    ORANGE = 37
    ORANGE_RED = 38
    ORCHID = 39
    PALE_GREEN = 40
    PINK = 41
    PLUM = 42
    SALMON = 43
    SEA_GREEN = 44
    SIENNA = 45
    SKY_BLUE = 46
    SLATE_BLUE = 47
    SPRING_GREEN = 48
    STEEL_BLUE = 49
    TAN = 50
    THISTLE = 51
    TURQUOISE = 52
    VIOLET = 53
    VIOLET_RED = 54
    WHEAT = 55
    YELLOW_GREEN = 56
    SUMMER_SKY = 57
    RICH_BLUE = 58
    BRASS = 59
    COPPER = 60
    BRONZE = 61
    BRONZE2 = 62
    SILVER = 63
    BRIGHT_GOLD = 64
    OLD_GOLD = 65
    FELDSPAR = 66
    QUARTZ = 67
    NEON_PINK = 68
    DARK_PURPLE = 69
    NEON_BLUE = 70
    COOL_COPPER = 71
    MANDARIN_ORANGE = 72
    LIGHT_WOOD = 73
    MEDIUM_WOOD = 74
    DARK_WOOD = 75
    SPICY_PINK = 76
    SEMI_SWEET_CHOC = 77
    BAKERS_CHOC = 78
    FLESH = 79
    NEW_TAN = 80
    NEW_MIDNIGHT_BLUE = 81
    VERY_DARK_BROWN = 82
    DARK_BROWN = 83
    DARK_TAN = 84
    GREEN_COPPER = 85
    DK_GREEN_COPPER = 86
    DUSTY_ROSE = 87
    HUNTERS_GREEN = 88
    SCARLET = 89
    MED_PURPLE = 90
    LIGHT_PURPLE = 91
    VERY_LIGHT_PURPLE = 92
    RED = 93
    GREEN = 94
    BLUE = 95
    YELLOW = 96
    PURPLE = 97
    WHITE = 98
    BLACK = 99


_TABLE: tuple[tuple[float, float, float], ...] = (
    (0.439216, 0.858824, 0.576471),
    (0.62352, 0.372549, 0.623529),
    (0.647059, 0.164706, 0.164706),
    (0.372549, 0.623529, 0.623529),
    (1, 0.498039, 0),
    (0.258824, 0.258824, 0.435294),
    (0.184314, 0.309804, 0.184314),
    (0.309804, 0.309804, 0.184314),
    (0.6, 0.196078, 0.8),
    (0.419608, 0.137255, 0.556863),
    (0.184314, 0.309804, 0.309804),
    (0.184314, 0.309804, 0.309804),
    (0.439216, 0.576471, 0.858824),
    (0.556863, 0.137255, 0.137255),
    (0.137255, 0.556863, 0.137255),
    (0.8, 0.498039, 0.196078),
    (0.858824, 0.858824, 0.439216),
    (0.576471, 0.858824, 0.439216),
    (0.309804, 0.184314, 0.184314),
    (0.623529, 0.623529, 0.372549),
    (0.74902, 0.847059, 0.847059),
    (0.560784, 0.560784, 0.737255),
    (0.196078, 0.8, 0.196078),
    (0.556863, 0.137255, 0.419608),
    (0.196078, 0.8, 0.6),
    (0.196078, 0.196078, 0.8),
    (0.419608, 0.556863, 0.137255),
    (0.917647, 0.917647, 0.678431),
    (0.576471, 0.439216, 0.858824),
    (0.258824, 0.435294, 0.258824),
    (0.498039, 0, 1),
    (0.498039, 1, 0),
    (0.439216, 0.858824, 0.858824),
    (0.858824, 0.439216, 0.576471),
    (0.184314, 0.184314, 0.309804),
    (0.137255, 0.137255, 0.556863),
    (0.137255, 0.137255, 0.556863),
    (1, 0.5, 0),
    (1, 0.25, 0),
    (0.858824, 0.439216, 0.858824),
    (0.560784, 0.737255, 0.560784),
    (0.737255, 0.560784, 0.560784),
    (0.917647, 0.678431, 0.917647),
    (0.435294, 0.258824, 0.258824),
    (0.137255, 0.556863, 0.419608),
    (0.556863, 0.419608, 0.137255),
    (0.196078, 0.6, 0.8),
    (0, 0.498039, 1),
    (0, 1, 0.498039),
    (0.137255, 0.419608, 0.556863),
    (0.858824, 0.576471, 0.439216),
    (0.847059, 0.74902, 0.847059),
    (0.678431, 0.917647, 0.917647),
    (0.309804, 0.184314, 0.309804),
    (0.8, 0.196078, 0.6),
    (0.847059, 0.847059, 0.74902),
    (0.6, 0.8, 0.196078),
    (0.22, 0.69, 0.87),
    (0.35, 0.35, 0.67),
    (0.71, 0.65, 0.26),
    (0.72, 0.45, 0.2),
    (0.55, 0.47, 0.14),
    (0.65, 0.49, 0.24),
    (0.9, 0.91, 0.98),
    (0.85, 0.85, 0.1),
    (0.81, 0.71, 0.23),
    (0.82, 0.57, 0.46),
    (0.85, 0.85, 0.95),
    (1, 0.43, 0.78),
    (0.53, 0.12, 0.47),
    (0.3, 0.3, 1),
    (0.85, 0.53, 0.1),
    (0.89, 0.47, 0.2),
    (0.91, 0.76, 0.65),
    (0.65, 0.5, 0.39),
    (0.52, 0.37, 0.26),
    (1, 0.11, 0.68),
    (0.42, 0.26, 0.15),
    (0.36, 0.2, 0.09),
    (0.96, 0.8, 0.69),
    (0.92, 0.78, 0.62),
    (0, 0, 0.61),
    (0.35, 0.16, 0.14),
    (0.36, 0.25, 0.2),
    (0.59, 0.41, 0.31),
    (0.32, 0.49, 0.46),
    (0.29, 0.46, 0.43),
    (0.52, 0.39, 0.39),
    (0.13, 0.37, 0.31),
    (0.55, 0.09, 0.09),
    (0.73, 0.16, 0.96),
    (0.87, 0.58, 0.98),
    (0.94, 0.81, 0.99),
    (1, 0, 0),
    (0, 1, 0),
    (0, 0, 1),
    (1, 1, 0),
    (0, 1, 1),
    (1, 1, 1),
    (0, 0, 0),
)


def rgb(color: NamedColor | int) -> tuple[float, float, float]:
    """Return the (r, g, b) components of a colour from the table.

    Raises ValueError for an index that names no colour.
    """
    return _TABLE[NamedColor(color)]