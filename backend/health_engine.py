"""
AGRI - Crop type and health classification from color-bucket ratios.
Rule-based: fixed thresholds on green/brown/yellow ratios, with bounded
random jitter on confidence and health score.
"""
import logging
import math
import random
from enum import Enum
from typing import List, Optional, Protocol, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from image_processor import ColorTally, decode_image, tally_colors
from localization import get_crop_name, get_issues, get_recommendations, resolve_language

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with random() -> float in [0, 1); random.Random qualifies."""

    def random(self) -> float:
        ...


class CropType(str, Enum):
    RICE = "rice"
    WHEAT = "wheat"
    SUGARCANE = "sugarcane"
    COTTON = "cotton"
    UNKNOWN = "unknown"


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    DISEASED = "diseased"
    PEST_DAMAGE = "pest_damage"
    NUTRIENT_DEFICIENCY = "nutrient_deficiency"


class ClassificationResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    crop_type: str
    confidence: float = Field(ge=0.0, le=1.0)
    health_status: HealthStatus
    health_score: int = Field(ge=0, le=100)
    detected_issues: List[str]
    recommendations: List[str]
    language: str


# Crop rules, evaluated in order; crop -> (base confidence, jitter span)
RICE_GREEN_MIN = 0.5
GREEN_CROP_MIN = 0.3
WHEAT_YELLOW_MIN = 0.1
COTTON_BROWN_MIN = 0.2
CROP_CONFIDENCE = {
    CropType.RICE: (0.85, 0.10),
    CropType.WHEAT: (0.80, 0.15),
    CropType.SUGARCANE: (0.75, 0.15),
    CropType.COTTON: (0.70, 0.20),
}
UNKNOWN_CONFIDENCE = 0.5

# Health rules, evaluated in order: brown (disease), yellow (nutrient), low green (pest)
DISEASE_BROWN_MIN = 0.3
NUTRIENT_YELLOW_MIN = 0.25
PEST_GREEN_MAX = 0.2
# status -> (text category, base score, jitter span)
HEALTH_SCORE = {
    HealthStatus.DISEASED: ("disease", 45, 20),
    HealthStatus.NUTRIENT_DEFICIENCY: ("nutrient", 60, 15),
    HealthStatus.PEST_DAMAGE: ("pest", 50, 20),
    HealthStatus.HEALTHY: ("healthy", 80, 15),
}


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def classify_crop(tally: ColorTally, rng: RandomSource) -> Tuple[CropType, float]:
    """
    Crop guess from color ratios. Returns (crop, confidence) with confidence
    rounded to 2 decimals. The unknown branch is exactly 0.5 and draws no jitter.
    """
    green, brown, yellow = tally.green_ratio, tally.brown_ratio, tally.yellow_ratio

    if green > RICE_GREEN_MIN:
        crop = CropType.RICE
    elif green > GREEN_CROP_MIN and yellow > WHEAT_YELLOW_MIN:
        crop = CropType.WHEAT
    elif green > GREEN_CROP_MIN:
        crop = CropType.SUGARCANE
    elif brown > COTTON_BROWN_MIN:
        crop = CropType.COTTON
    else:
        return CropType.UNKNOWN, UNKNOWN_CONFIDENCE

    base, span = CROP_CONFIDENCE[crop]
    confidence = base + rng.random() * span
    confidence = max(0.0, min(1.0, _round_half_up(confidence, 2)))
    return crop, confidence


def classify_health(
    tally: ColorTally,
    language: str,
    rng: RandomSource,
) -> Tuple[HealthStatus, int, List[str], List[str]]:
    """
    Health status from color ratios; first matching rule wins.
    Returns (status, score 0-100, localized issues, localized recommendations).
    """
    if tally.brown_ratio > DISEASE_BROWN_MIN:
        status = HealthStatus.DISEASED
    elif tally.yellow_ratio > NUTRIENT_YELLOW_MIN:
        status = HealthStatus.NUTRIENT_DEFICIENCY
    elif tally.green_ratio < PEST_GREEN_MAX:
        status = HealthStatus.PEST_DAMAGE
    else:
        status = HealthStatus.HEALTHY

    category, base, span = HEALTH_SCORE[status]
    score = int(_round_half_up(base + rng.random() * span))
    score = max(0, min(100, score))
    return status, score, get_issues(category, language), get_recommendations(category, language)


class CropHealthAnalyzer:
    """
    Stateless crop image analyzer. Inject rng (e.g. random.Random(seed) or a
    stub) for reproducible confidence and score jitter.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng if rng is not None else random.Random()

    def analyze(self, pixels: np.ndarray, language: str = "en") -> ClassificationResult:
        tally = tally_colors(pixels)
        crop, confidence = classify_crop(tally, self.rng)
        status, score, issues, recommendations = classify_health(tally, language, self.rng)
        logger.debug(
            "green=%.3f brown=%.3f yellow=%.3f -> crop=%s (%.2f), health=%s (%d), text=%s",
            tally.green_ratio, tally.brown_ratio, tally.yellow_ratio,
            crop.value, confidence, status.value, score, resolve_language(language),
        )
        return ClassificationResult(
            crop_type=get_crop_name(crop.value, language),
            confidence=confidence,
            health_status=status,
            health_score=score,
            detected_issues=issues,
            recommendations=recommendations,
            language=language,
        )

    def analyze_bytes(self, image_bytes: bytes, language: str = "en") -> ClassificationResult:
        """Decode an uploaded image and analyze it. Raises ImageDecodeError / EmptyImageError."""
        pixels = decode_image(image_bytes)
        return self.analyze(pixels, language)
