"""
Enums for the cooling-load calculator to ensure type safety and consistency
"""

from enum import Enum


class DifficultyTier(str, Enum):
    """How much of the room the user describes; the rest comes from presets"""
    low = 'low'
    medium = 'medium'
    high = 'high'


class RoofCondition(str, Enum):
    """Roof condition options, each selecting one roof U-factor"""
    exposed = 'exposed'
    shaded = 'shaded'
    water_covered = 'water-covered'
    insulated = 'insulated'


class Direction(str, Enum):
    """Compass direction a window or wall faces"""
    N = 'N'
    NE = 'NE'
    E = 'E'
    SE = 'SE'
    S = 'S'
    SW = 'SW'
    W = 'W'
    NW = 'NW'


class Appliance(str, Enum):
    """Closed catalog of appliances with a known electrical rating"""
    lights = 'Lights'
    oven_microwave = 'Oven/Microwave'
    fridge = 'Fridge'
    pc_laptop = 'PC/Laptop'
    tv = 'TV'
    fan = 'Fan'

    @classmethod
    def lookup(cls, name: str):
        """Return the catalog entry for a display name, or None if unknown"""
        try:
            return cls(name)
        except ValueError:
            return None
