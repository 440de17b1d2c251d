"""Integration adapters for XML libraries.

The builder produces text; adapters hand that text to other XML libraries so
callers can check or post-process formatted output. Conversions never raise:
failures come back as unsuccessful ``ConversionResult`` objects.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from xml_format_builder.formatting import XMLBuilder
from xml_format_builder.shared import (
    DiagnosticEntry,
    DiagnosticSeverity,
    get_logger,
)


@dataclass
class ConversionResult:
    """Result of a conversion operation."""

    success: bool
    converted_data: Any
    original_data: Any
    conversion_time_ms: float
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)


class LxmlAdapter:
    """Adapter that parses builder output with ``lxml.etree``."""

    name = "lxml"

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        """Initialize the adapter.

        Args:
            correlation_id: Optional correlation ID for request tracking
        """
        self.correlation_id = correlation_id
        self._logger = get_logger(__name__, correlation_id, self.__class__.__name__)

    def is_available(self) -> bool:
        """Check if lxml is available."""
        try:
            import lxml.etree  # noqa: F401
            return True
        except ImportError:
            return False

    def to_target(self, source: Union[XMLBuilder, str]) -> ConversionResult:
        """Parse rendered markup into an lxml element tree.

        Args:
            source: Builder whose output is parsed, or already rendered text

        Returns:
            ConversionResult containing the root ``lxml.etree._Element``; the
            messages of any diagnostics the builder recorded are carried as
            warnings
        """
        start_time = time.time()
        if isinstance(source, XMLBuilder):
            text = source.to_string()
            warnings = [entry.message for entry in source.diagnostics]
        else:
            text = source
            warnings = []

        try:
            import lxml.etree as ET
        except ImportError:
            return self._create_error_result(
                "lxml is not installed", source, (time.time() - start_time) * 1000, warnings
            )

        try:
            root = ET.fromstring(text.encode("utf-8"))
        except ET.XMLSyntaxError as e:
            self._logger.exception(
                "Rendered markup is not well-formed",
                extra={"text_length": len(text)}
            )
            return self._create_error_result(
                f"Failed to convert to lxml: {e}",
                source,
                (time.time() - start_time) * 1000,
                warnings
            )

        return ConversionResult(
            success=True,
            converted_data=root,
            original_data=source,
            conversion_time_ms=(time.time() - start_time) * 1000,
            warnings=warnings,
            metadata={
                "lxml_version": ET.LXML_VERSION,
                "element_count": len(root.xpath("//*")),
                "text_length": len(text),
            }
        )

    def _create_error_result(
        self,
        message: str,
        original: Any,
        processing_time: float,
        warnings: Optional[List[str]] = None
    ) -> ConversionResult:
        return ConversionResult(
            success=False,
            converted_data=None,
            original_data=original,
            conversion_time_ms=processing_time,
            warnings=list(warnings or []),
            errors=[message],
            diagnostics=[
                DiagnosticEntry(
                    severity=DiagnosticSeverity.ERROR,
                    message=message,
                    component=self.name,
                    correlation_id=self.correlation_id
                )
            ]
        )
