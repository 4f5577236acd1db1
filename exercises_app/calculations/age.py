"""Age group classification"""

from enum import Enum
from typing import Optional, Union

from ..config.defaults import AgeParams
from ..logging import get_logger

logger = get_logger(__name__)

_DEFAULT_BRACKETS = AgeParams()


class AgeGroup(str, Enum):
    """Age group labels."""
    MINOR = "Minor"
    ADULT = "Adult"
    SENIOR = "Senior"


def age_group(age: Union[int, float], brackets: Optional[AgeParams] = None) -> AgeGroup:
    """
    Classify an age into an age group.

    Minor below ``adult_min_age``, Adult up to ``senior_min_age - 1``
    inclusive, Senior for everything else. Inputs are not validated:
    negative ages are Minor, and anything that fails both comparisons
    (including NaN) falls through to Senior.

    Args:
        age: Age in years
        brackets: Bracket boundaries, defaults to 18 and 65

    Returns:
        The matching AgeGroup
    """
    brackets = brackets or _DEFAULT_BRACKETS

    if age < brackets.adult_min_age:
        group = AgeGroup.MINOR
    elif brackets.adult_min_age <= age <= brackets.senior_min_age - 1:
        group = AgeGroup.ADULT
    else:
        group = AgeGroup.SENIOR

    logger.debug("Age classified", age=age, group=group.value)
    return group


def classify_age(age: Union[int, float], brackets: Optional[AgeParams] = None) -> str:
    """Classify an age and return its label: "Minor", "Adult" or "Senior"."""
    return age_group(age, brackets).value
