"""
Data quality error classifications for price series input.

These exceptions describe problems with caller-supplied bars, detected while
converting raw records into PriceBar objects before a script run.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for price data issues."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """Required bar field is absent."""

    def __init__(self, message: str, data_type: Optional[str] = None,
                 missing_fields: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type
        self.missing_fields = missing_fields or []


class MalformedDataError(DataQualityError):
    """Bar field exists but holds an unusable value."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
