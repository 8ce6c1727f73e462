"""Pydantic data models used by the API."""
from __future__ import annotations

from datetime import datetime
from typing import Any, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Number = Union[int, float]

Industry = Literal[
    "government-federal",
    "government-state",
    "government-local",
    "education",
    "healthcare",
    "legal",
    "finance",
    "manufacturing",
    "professional-services",
    "not-for-profit",
    "indigenous-business",
    "retail",
    "hospitality",
    "construction",
    "other",
]
OrgSize = Literal["small", "medium", "large", "enterprise"]
PrinterIssue = Literal[
    "high-running-costs",
    "frequent-breakdowns",
    "slow-print-speed",
    "poor-print-quality",
    "security-concerns",
    "no-scanning",
    "outdated-features",
    "end-of-life",
    "no-mobile-printing",
    "limited-paper-capacity",
    "poor-support",
    "no-duplex",
    "other",
]
ContractType = Literal["owned", "leased", "managed-print", "unknown"]
ScanningNeeds = Literal["none", "occasional", "regular", "high-volume"]
SecurityLevel = Literal["basic", "standard", "high", "government-grade"]
BudgetRange = Literal["under-5k", "5k-10k", "10k-20k", "20k-50k", "over-50k", "flexible"]
Urgency = Literal["immediate", "1-3-months", "3-6-months", "planning"]
ProcurementType = Literal["government", "corporate", "sme", "indigenous-business"]
Preference = Literal["purchase", "lease", "managed-print", "undecided"]
ContactPreference = Literal["email", "phone", "either"]

REQUIRED_SECTIONS = (
    "businessProfile",
    "currentSetup",
    "printVolume",
    "workflowNeeds",
    "budgetTimeline",
)


def _unique(values: List[Any]) -> List[Any]:
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- Intake ----------
class BusinessProfile(CamelModel):
    industry: Industry = Field(..., description="Industry sector")
    org_size: OrgSize = Field(..., description="Organisation size bracket")
    employee_count: int = Field(..., ge=1, le=100000)
    location: str = Field(..., min_length=2, max_length=100)


class CurrentSetup(CamelModel):
    brand: str = Field(..., min_length=1, description="Current printer brand")
    model: str = Field("", description="Current printer model, if known")
    age_years: float = Field(..., ge=0, le=20)
    issues: List[PrinterIssue] = Field(..., min_length=1)
    contract_type: ContractType

    @field_validator("issues")
    @classmethod
    def _collapse_issues(cls, value: List[str]) -> List[str]:
        return _unique(value)


class PrintVolume(CamelModel):
    monthly_a4: int = Field(..., ge=0, le=1000000)
    monthly_a3: int = Field(0, ge=0, le=500000)
    color_percentage: float = Field(..., ge=0, le=100)
    peak_periods: str = Field("", description="Free-text description of busy periods")

    @property
    def total_pages(self) -> int:
        return self.monthly_a4 + self.monthly_a3

    @property
    def color_pages(self) -> int:
        # Bounded percentage keeps colour <= total.
        return int(round(self.total_pages * self.color_percentage / 100))

    @property
    def mono_pages(self) -> int:
        return self.total_pages - self.color_pages

    @property
    def needs_a3(self) -> bool:
        return self.monthly_a3 > 0


class WorkflowNeeds(CamelModel):
    document_types: List[str] = Field(..., min_length=1)
    scanning_needs: ScanningNeeds
    security_level: SecurityLevel
    cloud_integration: bool = False
    mobile_printing: bool = False

    @field_validator("document_types")
    @classmethod
    def _collapse_document_types(cls, value: List[str]) -> List[str]:
        cleaned = _unique([item.strip() for item in value if item.strip()])
        if not cleaned:
            raise ValueError("Please select at least one document type")
        return cleaned


class BudgetTimeline(CamelModel):
    budget_range: BudgetRange
    urgency: Urgency
    procurement_type: ProcurementType
    preference: Preference


class AnalyzeRequest(CamelModel):
    business_profile: BusinessProfile
    current_setup: CurrentSetup
    print_volume: PrintVolume
    workflow_needs: WorkflowNeeds
    budget_timeline: BudgetTimeline


class ContactInfo(CamelModel):
    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    phone: str = Field(..., pattern=r"^(\+61|0)[2-9]\d{8}$", description="Australian phone number")
    company: str = Field(..., min_length=2, max_length=100)
    job_title: str = ""
    preferred_contact: ContactPreference


class AssessmentFormData(AnalyzeRequest):
    contact_info: ContactInfo


# ---------- Catalog ----------
class Product(CamelModel):
    id: str
    model: str
    name: str
    format: Literal["A3", "A4"]
    color: bool = True
    speed: int = Field(0, description="Pages per minute")
    volume_min: int = 0
    volume_max: int = 0
    ideal_for: str = ""
    description: str = ""
    features: List[str] = Field(default_factory=list)

    @classmethod
    def placeholder(cls, product_id: str) -> "Product":
        """Catalog-shaped stand-in for an identifier the catalog does not know."""
        return cls(
            id=product_id,
            model=product_id,
            name="Unknown Product",
            format="A4",
            color=True,
            speed=0,
            volume_min=0,
            volume_max=0,
            ideal_for="",
            description="",
            features=[],
        )


# ---------- Analysis ----------
class CostBreakdown(CamelModel):
    toner: Number = 0
    paper: Number = 0
    maintenance: Number = 0
    energy: Number = 0


class CurrentCostEstimate(CamelModel):
    monthly: Number = 0
    annual: Number = 0
    breakdown: Optional[CostBreakdown] = None


class PotentialSavings(CamelModel):
    monthly: Number = 0
    annual: Number = 0
    percentage: Number = 0


class WorkflowInsight(CamelModel):
    category: str = ""
    title: str = ""
    description: str = ""
    impact: str = ""


class ROIProjection(CamelModel):
    breakeven_months: Number = 0
    three_year_savings: Number = 0
    five_year_savings: Number = 0
    annualized_roi: Number = Field(0, alias="annualizedROI")


class IndustryBenchmarks(CamelModel):
    average_cost_per_page: Number = 0
    typical_savings: str = ""
    adoption_trend: str = ""


class RecommendationPayload(CamelModel):
    """A recommendation as the model returns it: product referenced by id only."""

    model_config = ConfigDict(extra="allow")

    product_id: str
    match_score: Optional[Number] = None
    reasons: List[str] = Field(default_factory=list)
    estimated_cost: Optional[Number] = None
    payback_period_months: Optional[Number] = None
    priority: Optional[str] = None


class ProductRecommendation(RecommendationPayload):
    product: Product


class AnalysisPayload(CamelModel):
    """Structural shape expected from the model's JSON reply."""

    model_config = ConfigDict(extra="allow")

    executive_summary: str = Field(
        "",
        validation_alias=AliasChoices("executiveSummary", "summary", "executive_summary"),
        serialization_alias="executiveSummary",
    )
    current_cost_estimate: Optional[CurrentCostEstimate] = None
    potential_savings: Optional[PotentialSavings] = None
    recommendations: List[RecommendationPayload]
    workflow_insights: List[WorkflowInsight] = Field(default_factory=list)
    security_considerations: List[str] = Field(default_factory=list)
    roi_projection: Optional[ROIProjection] = None
    industry_benchmarks: Optional[IndustryBenchmarks] = None


class AnalysisResult(AnalysisPayload):
    recommendations: List[ProductRecommendation]
    generated_at: datetime

    def primary_recommendation(self) -> Optional[ProductRecommendation]:
        for recommendation in self.recommendations:
            if recommendation.priority == "primary":
                return recommendation
        return None


# ---------- Envelopes ----------
class AnalyzeResponse(CamelModel):
    success: bool
    analysis: Optional[AnalysisResult] = None
    error: Optional[str] = None


class SubmitRequest(CamelModel):
    assessment_data: AssessmentFormData
    analysis: AnalysisResult


class SubmitResponse(CamelModel):
    success: bool
    assessment_id: Optional[str] = None
    error: Optional[str] = None


class ContactRequest(CamelModel):
    name: str = Field(..., min_length=2)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    phone: Optional[str] = None
    organisation: Optional[str] = None
    message: str = Field(..., min_length=10)


class ContactResponse(CamelModel):
    success: bool
    error: Optional[str] = None


class HealthResponse(CamelModel):
    status: str
    ai_service: Optional[str] = None
    catalog_version: Optional[str] = None
    product_count: int = 0
