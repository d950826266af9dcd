"""Class-token presets shared by the builders.

Tokens are opaque strings. Each one starts with a space so presets can be
concatenated without a separator; ``swapui.html.classes`` normalises the
result.
"""
from __future__ import annotations

XS = " p-1"
SM = " p-2"
MD = " p-3"
ST = " p-4"
LG = " p-5"
XL = " p-6"

AREA = " cursor-pointer bg-white border border-gray-300 hover:border-blue-500 rounded-lg block w-full"
INPUT = " cursor-pointer bg-white border border-gray-300 hover:border-blue-500 rounded-lg block w-full h-12"
VALUE = " bg-white border border-gray-300 hover:border-blue-500 rounded-lg block h-12"
BTN = " cursor-pointer font-bold text-center select-none"
DISABLED = " cursor-text pointer-events-none bg-gray-50"

# Wrapper modifiers for choice controls.
MUTED = "opacity-50 pointer-events-none"
INVALID_IF = "invalid-if"
INVALID = "invalid"

YELLOW = " bg-yellow-400 text-gray-800 hover:text-gray-200 hover:bg-yellow-600 font-bold border-gray-300 flex items-center justify-center"
YELLOW_OUTLINE = " border border-yellow-500 text-yellow-600 hover:text-gray-700 hover:bg-yellow-500 flex items-center justify-center"
GREEN = " bg-green-600 text-white hover:bg-green-700 checked:bg-green-600 border-gray-300 flex items-center justify-center"
GREEN_OUTLINE = " border border-green-500 text-green-500 hover:text-white hover:bg-green-600 flex items-center justify-center"
PURPLE = " bg-purple-500 text-white hover:bg-purple-700 border-purple-500 flex items-center justify-center"
PURPLE_OUTLINE = " border border-purple-500 text-purple-500 hover:text-white hover:bg-purple-600 flex items-center justify-center"
BLUE = " bg-blue-800 text-white hover:bg-blue-700 border-gray-300 flex items-center justify-center"
BLUE_OUTLINE = " border border-blue-500 text-blue-600 hover:text-white hover:bg-blue-700 checked:bg-blue-700 flex items-center justify-center"
RED = " bg-red-600 text-white hover:bg-red-800 border-gray-300 flex items-center justify-center"
RED_OUTLINE = " border border-red-500 text-red-600 hover:text-white hover:bg-red-700 flex items-center justify-center"
GRAY = " bg-gray-600 text-white hover:bg-gray-800 focus:bg-gray-800 border-gray-300 flex items-center justify-center"
GRAY_OUTLINE = " border border-gray-300 text-black hover:text-white hover:bg-gray-700 flex items-center justify-center"
WHITE = " bg-white text-black hover:bg-gray-200 border-gray-200 flex items-center justify-center"
WHITE_OUTLINE = " border border-white text-black hover:text-black hover:bg-white flex items-center justify-center"


__all__ = [
    "AREA",
    "BLUE",
    "BLUE_OUTLINE",
    "BTN",
    "DISABLED",
    "GRAY",
    "GRAY_OUTLINE",
    "GREEN",
    "GREEN_OUTLINE",
    "INPUT",
    "INVALID",
    "INVALID_IF",
    "LG",
    "MD",
    "MUTED",
    "PURPLE",
    "PURPLE_OUTLINE",
    "RED",
    "RED_OUTLINE",
    "SM",
    "ST",
    "VALUE",
    "WHITE",
    "WHITE_OUTLINE",
    "XL",
    "XS",
    "YELLOW",
    "YELLOW_OUTLINE",
]
