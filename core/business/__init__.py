"""
ReceptionAI Core Business: vertical-driven presentation.

One generic booking/call/catalogue model, presented per business vertical:
- Registry: vertical label → VerticalConfig (fail-open to restaurant)
- Metadata: per-vertical validation of free-form booking metadata
- Vocabulary: display terms for the seven semantic keys
- Formatter: metadata → display summary
"""
from core.business.formatter import (
    FormattedMetadata,
    format_metadata,
    register_formatter,
)
from core.business.metadata import (
    FieldError,
    MetadataRejected,
    MetadataValidationResult,
    validate_metadata,
)
from core.business.registry import (
    DEFAULT_VERTICAL,
    VERTICAL_CONFIGS,
    VERTICAL_SYNONYMS,
    RegistryError,
    is_known_vertical,
    list_verticals,
    parse_vertical,
    resolve_vertical,
    resolve_vertical_config,
)
from core.business.vocabulary import get_vocabulary, vocabulary_for

__all__ = [
    # Formatter
    "FormattedMetadata",
    "format_metadata",
    "register_formatter",
    # Metadata
    "FieldError",
    "MetadataRejected",
    "MetadataValidationResult",
    "validate_metadata",
    # Registry
    "DEFAULT_VERTICAL",
    "VERTICAL_CONFIGS",
    "VERTICAL_SYNONYMS",
    "RegistryError",
    "is_known_vertical",
    "list_verticals",
    "parse_vertical",
    "resolve_vertical",
    "resolve_vertical_config",
    # Vocabulary
    "get_vocabulary",
    "vocabulary_for",
]
