from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

from tagparser.tools.error import ConversionError


class PopularityScale(Enum):
    UNSPECIFIED    = 0  # treated like GENERIC
    GENERIC        = 1  # 1..5
    ID3V2          = 2  # 1..255
    VORBIS_COMMENT = 3  # 20..100
    MATROSKA       = 4  # 0..5
    MP4            = 5  # same as ID3V2


################################################################################
## Rating of each scale matching the generic ratings 1, 2, 3, 4 and 5
################################################################################
GENERIC_POINTS = np.array([1.0, 2.0, 3.0, 4.0, 5.0])

SCALE_POINTS = {
    PopularityScale.UNSPECIFIED: GENERIC_POINTS,
    PopularityScale.GENERIC: GENERIC_POINTS,
    PopularityScale.ID3V2: np.array([1.0, 64.0, 128.0, 196.0, 255.0]),
    PopularityScale.VORBIS_COMMENT: np.array([20.0, 40.0, 60.0, 80.0, 100.0]),
    PopularityScale.MATROSKA: GENERIC_POINTS,
    PopularityScale.MP4: np.array([1.0, 64.0, 128.0, 196.0, 255.0]),
}

_GENERIC_SCALES = {PopularityScale.UNSPECIFIED, PopularityScale.GENERIC}


def convert_rating(rating: float, source: PopularityScale, target: PopularityScale) -> float:
    """Maps a rating linearly per segment between two scales; 0 (unrated) stays 0."""
    if rating == 0 or source == target or {source, target} <= _GENERIC_SCALES:
        return float(rating)
    generic = np.interp(rating, SCALE_POINTS[source], GENERIC_POINTS)
    return float(np.interp(generic, GENERIC_POINTS, SCALE_POINTS[target]))


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


@dataclass(frozen=True)
class Popularity:
    user: str = ''
    rating: float = 0.0
    play_counter: int = 0
    scale: PopularityScale = PopularityScale.UNSPECIFIED

    def is_empty(self) -> bool:
        return not self.user and self.rating == 0 and self.play_counter == 0

    def scaled(self, scale: PopularityScale) -> 'Popularity':
        return replace(self, rating=convert_rating(self.rating, self.scale, scale), scale=scale)

    def to_string(self) -> str:
        """Returns "user|rating|play_counter", omitting trailing fields which are zero."""
        fields = [self.user, _format_number(self.rating), str(self.play_counter)]
        if self.play_counter == 0:
            fields.pop()
            if self.rating == 0:
                fields.pop()
        return '|'.join(fields)

    @classmethod
    def from_string(cls, text: str, scale: PopularityScale = PopularityScale.UNSPECIFIED) -> 'Popularity':
        parts = text.split('|')
        if len(parts) > 3:
            raise ConversionError(f"'{text}' has too many fields for a popularity")
        try:
            rating = float(parts[1]) if len(parts) > 1 and parts[1] else 0.0
            play_counter = int(parts[2]) if len(parts) > 2 and parts[2] else 0
        except ValueError as e:
            raise ConversionError(f"'{text}' is not a valid popularity") from e
        if play_counter < 0:
            raise ConversionError(f"play counter of '{text}' is negative")
        return cls(parts[0], rating, play_counter, scale)

    def __str__(self):
        return self.to_string()
