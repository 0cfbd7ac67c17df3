"""
Decision Scoring Engine - Weight Blender.

============================================================
PURPOSE
============================================================
Merges the user's configured weights with the fixed weight
table of their risk personality.

    blended[k] = user[k] * 0.6 + personality[k] * 0.4

The blended vector is then normalized to sum to 1.0, so the
weighted total stays in [0, 100] whatever scale the user's
weights were given in.

============================================================
FAILURE HANDLING
============================================================
A blended vector summing to zero is rejected with
DegenerateWeightsError. No default is substituted.

============================================================
"""

import logging
from typing import Any, Mapping, Union

from .config import (
    DEFAULT_USER_WEIGHTS,
    PERSONALITY_WEIGHT_RATIO,
    USER_WEIGHT_RATIO,
    get_personality_profile,
)
from .types import (
    Criterion,
    DegenerateWeightsError,
    RiskPersonality,
    WeightVector,
)

logger = logging.getLogger(__name__)


WeightsLike = Union[WeightVector, Mapping[Any, Any], None]


class WeightBlender:
    """
    Blends user weights with a personality prior.

    Stateless; one instance can serve any number of calls.
    """

    def __init__(
        self,
        user_ratio: float = USER_WEIGHT_RATIO,
        personality_ratio: float = PERSONALITY_WEIGHT_RATIO,
    ):
        self.user_ratio = user_ratio
        self.personality_ratio = personality_ratio

    def blend(
        self,
        user_weights: WeightsLike,
        personality: Union[RiskPersonality, str, None] = RiskPersonality.BALANCED,
    ) -> WeightVector:
        """
        Produce the final normalized weight vector.

        Args:
            user_weights: Stored user weights; None means no
                          preference (the balanced table is used)
            personality: Risk personality or its label

        Returns:
            WeightVector summing to 1.0

        Raises:
            InvalidInputError: On an unknown personality
            InvalidWeightsError: On negative or non-numeric weights
            DegenerateWeightsError: If the blend sums to zero
        """
        user = DEFAULT_USER_WEIGHTS if user_weights is None else WeightVector.from_mapping(user_weights)
        profile = get_personality_profile(personality)

        blended = WeightVector(**{
            c.value: user.get(c) * self.user_ratio + profile.get(c) * self.personality_ratio
            for c in Criterion.all_criteria()
        })

        if blended.total <= 0:
            raise DegenerateWeightsError(
                "Blended weight vector sums to zero; check the stored weight preference"
            )

        result = blended.normalized()
        logger.debug(
            f"Blended weights for personality={RiskPersonality.parse(personality).value}: "
            f"{result.as_dict()}"
        )
        return result


_default_blender = WeightBlender()


def blend(
    user_weights: WeightsLike = None,
    personality: Union[RiskPersonality, str, None] = RiskPersonality.BALANCED,
) -> WeightVector:
    """
    Convenience function: blend with the fixed 0.6 / 0.4 ratio.

    See WeightBlender.blend.
    """
    return _default_blender.blend(user_weights, personality)
