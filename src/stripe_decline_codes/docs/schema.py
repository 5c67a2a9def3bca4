"""
Documentation Artifact Schemas

Pydantic models for the documentation files written by the exporter:
- decline-codes: every code with its texts and translations
- types: the public types and their fields
- functions: the public function reference
- metadata: package information and dataset statistics

Field names are snake_case in Python and camelCase in the written files
(``model_dump(by_alias=True)``). The core library never reads these files.
"""
from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals
# =============================================================================

CategoryValue = Literal["SOFT_DECLINE", "HARD_DECLINE"]

LocaleValue = Literal["en", "ja"]

TypeKindValue = Literal["type-alias", "enum", "dataclass"]


class _ArtifactModel(BaseModel):
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
    }


# =============================================================================
# decline-codes
# =============================================================================

class TranslationSchema(_ArtifactModel):
    """Localized texts for one locale."""
    description: str = Field(..., min_length=1)
    next_user_action: str = Field(..., min_length=1, alias="nextUserAction")


class DeclineCodeEntrySchema(_ArtifactModel):
    """One decline code as rendered in the documentation."""
    code: str = Field(..., pattern=r"^[a-z0-9]+(?:_[a-z0-9]+)*$")
    category: CategoryValue
    description: str = Field(..., min_length=1)
    next_steps: str = Field(..., min_length=1, alias="nextSteps")
    next_user_action: str = Field(..., min_length=1, alias="nextUserAction")
    translations: dict[LocaleValue, TranslationSchema] = Field(default_factory=dict)


class CategorySummarySchema(_ArtifactModel):
    description: str
    codes: list[str] = Field(default_factory=list)


class DeclineCodesDocument(_ArtifactModel):
    """Complete decline code database."""
    schema_ref: str = Field("./schemas/decline-codes.schema.json", alias="$schema")
    version: str = Field(..., description="Stripe documentation version (YYYY-MM-DD)")
    generated_at: datetime = Field(..., alias="generatedAt")
    total_codes: int = Field(..., ge=0, alias="totalCodes")
    categories: dict[CategoryValue, CategorySummarySchema]
    codes: list[DeclineCodeEntrySchema]

    @model_validator(mode="after")
    def validate_totals(self) -> "DeclineCodesDocument":
        """Counts and category lists must cover the code list exactly."""
        if self.total_codes != len(self.codes):
            raise ValueError(
                f"totalCodes is {self.total_codes} but {len(self.codes)} codes are listed"
            )
        listed = [entry.code for entry in self.codes]
        categorized = [
            code
            for summary in self.categories.values()
            for code in summary.codes
        ]
        if sorted(listed) != sorted(categorized):
            raise ValueError("category code lists do not partition the code list")
        for entry in self.codes:
            summary = self.categories.get(entry.category)
            if summary is None or entry.code not in summary.codes:
                raise ValueError(f"{entry.code} is not listed under {entry.category}")
        return self


# =============================================================================
# types
# =============================================================================

class TypePropertySchema(_ArtifactModel):
    name: str
    type: str
    description: str
    optional: Optional[bool] = None


class TypeDefinitionSchema(_ArtifactModel):
    name: str
    kind: TypeKindValue
    description: str
    definition: Optional[str] = None
    values: Optional[list[str]] = None
    properties: Optional[list[TypePropertySchema]] = None


class TypesDocument(_ArtifactModel):
    schema_ref: str = Field("./schemas/types.schema.json", alias="$schema")
    version: str
    generated_at: datetime = Field(..., alias="generatedAt")
    types: list[TypeDefinitionSchema]


# =============================================================================
# functions
# =============================================================================

class FunctionParameterSchema(_ArtifactModel):
    name: str
    type: str
    optional: bool
    description: str = ""


class FunctionReturnSchema(_ArtifactModel):
    type: str
    description: str = ""


class FunctionDefinitionSchema(_ArtifactModel):
    name: str
    description: str = Field(..., min_length=1)
    signature: str
    parameters: list[FunctionParameterSchema] = Field(default_factory=list)
    returns: FunctionReturnSchema
    example: Optional[str] = None


class FunctionsDocument(_ArtifactModel):
    schema_ref: str = Field("./schemas/functions.schema.json", alias="$schema")
    version: str
    generated_at: datetime = Field(..., alias="generatedAt")
    functions: list[FunctionDefinitionSchema]


# =============================================================================
# metadata
# =============================================================================

class PackageInfoSchema(_ArtifactModel):
    name: str
    version: str
    description: str
    repository: str = ""
    license: str


class StatsSchema(_ArtifactModel):
    total_decline_codes: int = Field(..., ge=0, alias="totalDeclineCodes")
    soft_decline_codes: int = Field(..., ge=0, alias="softDeclineCodes")
    hard_decline_codes: int = Field(..., ge=0, alias="hardDeclineCodes")
    total_functions: int = Field(..., ge=0, alias="totalFunctions")
    total_types: int = Field(..., ge=0, alias="totalTypes")

    @model_validator(mode="after")
    def validate_partition(self) -> "StatsSchema":
        if self.soft_decline_codes + self.hard_decline_codes != self.total_decline_codes:
            raise ValueError("soft + hard decline counts must equal the total")
        return self


class MetadataDocument(_ArtifactModel):
    schema_ref: str = Field("./schemas/metadata.schema.json", alias="$schema")
    schema_version: str = Field(SCHEMA_VERSION, alias="schemaVersion")
    package: PackageInfoSchema
    stripe_doc_version: str = Field(..., alias="stripeDocVersion")
    generated_at: datetime = Field(..., alias="generatedAt")
    supported_locales: list[LocaleValue] = Field(..., alias="supportedLocales")
    dataset_hash: str = Field(..., min_length=64, max_length=64, alias="datasetHash")
    stats: StatsSchema


__all__ = [
    "SCHEMA_VERSION",
    "TranslationSchema",
    "DeclineCodeEntrySchema",
    "CategorySummarySchema",
    "DeclineCodesDocument",
    "TypePropertySchema",
    "TypeDefinitionSchema",
    "TypesDocument",
    "FunctionParameterSchema",
    "FunctionReturnSchema",
    "FunctionDefinitionSchema",
    "FunctionsDocument",
    "PackageInfoSchema",
    "StatsSchema",
    "MetadataDocument",
]
