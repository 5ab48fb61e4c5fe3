"""Abstract base MTU extractor."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from loguru import logger

from mtuvalidator.exceptions import ExtractionErrorCode, MtuExtractionError
from mtuvalidator.models import IPV4_MINIMUM_MTU, JUMBO_FRAME_MTU, ExtractorMetadata

# ASCII digits only, optional sign
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class BaseMtuExtractor(ABC):
    """Pull an integer MTU out of a typed source.

    Subclasses implement :meth:`extract`, raising :class:`MtuExtractionError`
    with exactly one error code per failure. Callers that prefer values over
    exceptions use :meth:`try_extract`.
    """

    METADATA: ClassVar[ExtractorMetadata]

    @abstractmethod
    def extract(self, source: Any) -> int:
        """Return the MTU found in ``source``."""

    def try_extract(self, source: Any) -> int | MtuExtractionError:
        """Like :meth:`extract`, but return the classified error instead of raising it."""
        try:
            return self.extract(source)
        except MtuExtractionError as e:
            logger.bind(classname=type(self).__name__).debug(f"Extraction failed [{e.code.value}]: {e.message}")
            return e

    @property
    def metadata(self) -> ExtractorMetadata:
        return self.METADATA

    @staticmethod
    def is_standard_mtu(value: int) -> bool:
        """True if ``value`` lies within the common 68-9000 byte range."""
        return IPV4_MINIMUM_MTU <= value <= JUMBO_FRAME_MTU


def parse_mtu(raw: Any, what: str) -> int:
    """Parse ``raw`` as a base-10 integer MTU.

    Raises:
        MtuExtractionError: INVALID_MTU_FORMAT, with the parse error as cause.
    """
    if isinstance(raw, bool):
        raise MtuExtractionError(
            ExtractionErrorCode.INVALID_MTU_FORMAT,
            f"Invalid MTU value format for {what}: {raw!r}",
        )
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    try:
        if not _INTEGER_RE.fullmatch(text):
            raise ValueError(f"invalid literal for int() with base 10: {text!r}")
        return int(text, 10)
    except ValueError as e:
        raise MtuExtractionError(
            ExtractionErrorCode.INVALID_MTU_FORMAT,
            f"Invalid MTU value format for {what}: {raw!r}",
            e,
        ) from e
