"""
Equipment sizing helpers
Turns a calculated load into the nominal AC size shown to the user
"""

import math
from typing import Dict

# Room units are sold in half-ton steps
NOMINAL_STEP_TONS = 0.5


def recommend_nominal_tons(tonnage: float) -> float:
    """Round a calculated load up to the next half ton"""
    steps = 1 / NOMINAL_STEP_TONS
    return math.ceil(tonnage * steps) / steps


def equipment_match_rating(equipment_capacity_tons: float, cooling_load_tons: float) -> Dict[str, str]:
    """
    Rate a unit capacity against the calculated load in half-ton steps

    - Good: covers the load and is the smallest half-ton unit that does
    - OK: one step larger than needed
    - Poor: below the load, or two or more steps larger

    Args:
        equipment_capacity_tons: Unit capacity in tons
        cooling_load_tons: Calculated cooling load in tons

    Returns:
        Dict with rating and explanation
    """
    if cooling_load_tons <= 0:
        return {"rating": "Unknown", "explanation": "Invalid load calculation"}

    headroom = equipment_capacity_tons - cooling_load_tons
    if headroom < 0:
        return {
            "rating": "Poor",
            "explanation": f"Unit is {-headroom:.2f} tons short of the load (undersized)"
        }

    extra_steps = int(headroom // NOMINAL_STEP_TONS)
    if extra_steps == 0:
        return {
            "rating": "Good",
            "explanation": f"Smallest half-ton unit covering the load ({headroom:.2f} tons headroom)"
        }
    elif extra_steps == 1:
        return {
            "rating": "OK",
            "explanation": "One half-ton step above the smallest unit that covers the load"
        }
    else:
        return {
            "rating": "Poor",
            "explanation": f"{extra_steps} half-ton steps above the smallest unit that covers the load (oversized)"
        }
