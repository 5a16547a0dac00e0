"""Configuration validation endpoints."""

from fastapi import APIRouter

from shadesails.application.config import load_config_from_dict, validate_config
from shadesails.web.schemas.requests import ConfigValidateRequest
from shadesails.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a quote configuration without pricing it.

    Args:
        request: Request containing configuration to validate.

    Returns:
        Validation result with errors, warnings and typo suggestions.

    Raises:
        ConfigError: If the configuration cannot be parsed.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        exit_code=result.exit_code,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
        suggestions=[
            {
                "message": s.message,
                "path": s.path,
                "value": s.value,
                "suggested_value": s.suggested_value,
            }
            for s in result.suggestions
        ],
    )
