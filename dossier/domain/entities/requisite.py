"""Requisite domain entity.

A requisite is a named requirement (e.g. "Contract", "Vaccination card")
that becomes one document in every folder it applies to.
"""

from dataclasses import dataclass

from dossier.domain.enums import ValidityUnit
from dossier.domain.exceptions import ValidationException

# Days per unit; a month is counted as 30 days and a year as 365.25.
_DAYS_PER_UNIT: dict[ValidityUnit, float] = {
    ValidityUnit.DAY: 1,
    ValidityUnit.MONTH: 30,
    ValidityUnit.YEAR: 365.25,
}


@dataclass
class RequisiteEntity:
    """Domain entity for a requisite.

    Validity fields are only meaningful when is_validity_required is True.
    """

    id: str
    name: str
    description: str | None = None
    format: str | None = None
    is_validity_required: bool = False
    validity_value: int | None = None
    validity_unit: ValidityUnit | None = None
    is_active: bool = True

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate requisite business rules. Raises ValidationException if invalid."""
        if not self.name or not self.name.strip():
            raise ValidationException("Requisite name is required", field="name")
        if self.is_validity_required:
            if self.validity_value is None or self.validity_unit is None:
                raise ValidationException(
                    f"Requisite '{self.name}' requires validity_value and validity_unit",
                    field="validity_value",
                )
            if self.validity_value <= 0:
                raise ValidationException(
                    "validity_value must be greater than 0", field="validity_value"
                )

    def validity_days(self) -> float:
        """Return the validity period in days (fractional for years).

        Raises:
            ValidationException: If the requisite does not require validity.
        """
        if not self.is_validity_required:
            raise ValidationException(
                f"Requisite '{self.name}' does not require validity",
                field="is_validity_required",
            )
        if self.validity_value is None or self.validity_unit is None:
            raise ValidationException(
                f"Requisite '{self.name}' has no validity period configured",
                field="validity_unit",
            )
        return self.validity_value * _DAYS_PER_UNIT[self.validity_unit]
