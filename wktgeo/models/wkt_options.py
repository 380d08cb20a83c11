"""Pipeline options shared by the tokenizer, parser and converters"""
from typing import Any, Callable
from pydantic import BaseModel, ConfigDict, Field, field_validator

from wktgeo.core import ElementFailurePolicy


class WktOptions(BaseModel):
    """
    Options for one parse/convert pipeline.

    The same instance should be handed to every stage so all coordinates share
    one numeric type.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "coord_type": "float",
                "element_failure_policy": "propagate",
            }
        },
    )

    coord_type: Callable[[str], Any] = Field(
        default=float,
        description="Callable building a coordinate number from its decimal text "
                    "(float, numpy.float32, numpy.float64, decimal.Decimal)"
    )
    element_failure_policy: ElementFailurePolicy = Field(
        default=ElementFailurePolicy.PROPAGATE,
        description="Whether an unconvertible multi-geometry or collection member "
                    "aborts the conversion or is dropped"
    )

    @field_validator("coord_type")
    @classmethod
    def validate_coord_type(cls, value: Callable[[str], Any]) -> Callable[[str], Any]:
        """Check that coord_type builds a fractional number from decimal text"""
        try:
            built = float(value("0.5"))
        except (TypeError, ValueError, ArithmeticError) as e:
            raise ValueError(
                f"coord_type must build a number from decimal text. "
                f"Error: {type(e).__name__}: {str(e)}"
            ) from e

        if built != 0.5:
            raise ValueError(f"coord_type must keep fractional values, got {built} for '0.5'")
        return value


DEFAULT_OPTIONS = WktOptions()
