"""Business logic for assessment endpoints."""
from __future__ import annotations

import logging
import secrets
import string
import time
from datetime import datetime, timezone
from typing import Any, Dict, List

from pydantic import ValidationError

from .catalog import CatalogData
from .errors import InvalidAssessmentError, InvalidFormDataError, MissingFieldsError
from .llm_client import AnthropicClient
from .models import (
    REQUIRED_SECTIONS,
    AnalysisPayload,
    AnalysisResult,
    AnalyzeRequest,
    ContactRequest,
    Product,
    ProductRecommendation,
    RecommendationPayload,
    SubmitRequest,
)
from .parsing import extract_text, parse_analysis
from .prompts import ASSESSMENT_SYSTEM_PROMPT, PRODUCT_IDS, build_assessment_prompt

LOGGER = logging.getLogger(__name__)

ASSESSMENT_ID_PREFIX = "DPS"
_ID_ALPHABET = string.ascii_uppercase + string.digits


def validate_intake(payload: Any) -> AnalyzeRequest:
    """Reject absent sections first, then run the per-field schemas."""
    if not isinstance(payload, dict):
        raise MissingFieldsError()
    missing = [name for name in REQUIRED_SECTIONS if payload.get(name) is None]
    if missing:
        LOGGER.info("Assessment request missing sections: %s", ", ".join(missing))
        raise MissingFieldsError()
    try:
        return AnalyzeRequest.model_validate(payload)
    except ValidationError as exc:
        LOGGER.info("Assessment request failed validation: %s", exc)
        raise InvalidAssessmentError() from exc


def hydrate_recommendations(
    recommendations: List[RecommendationPayload], catalog: CatalogData
) -> List[ProductRecommendation]:
    hydrated = []
    for recommendation in recommendations:
        product = catalog.get(recommendation.product_id)
        if product is None:
            LOGGER.warning("Product not found: %s", recommendation.product_id)
            product = Product.placeholder(recommendation.product_id)
        fields = recommendation.model_dump(by_alias=True)
        fields["product"] = product
        hydrated.append(ProductRecommendation.model_validate(fields))
    return hydrated


def build_analysis(payload: AnalysisPayload, catalog: CatalogData) -> AnalysisResult:
    fields = payload.model_dump(by_alias=True)
    fields["recommendations"] = hydrate_recommendations(payload.recommendations, catalog)
    fields["generatedAt"] = datetime.now(timezone.utc)
    return AnalysisResult.model_validate(fields)


def new_assessment_id() -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(5))
    return f"{ASSESSMENT_ID_PREFIX}-{int(time.time() * 1000)}-{suffix}"


class AssessmentService:
    def __init__(self, catalog: CatalogData, client: AnthropicClient) -> None:
        self.catalog = catalog
        self.client = client
        missing = sorted(set(PRODUCT_IDS) - set(catalog.ids()))
        if missing:
            LOGGER.warning("Catalog has no entry for prompted product ids: %s", ", ".join(missing))
        extra = sorted(set(catalog.ids()) - set(PRODUCT_IDS))
        if extra:
            LOGGER.warning("Catalog products never offered to the model: %s", ", ".join(extra))

    def analyze(self, payload: Any) -> AnalysisResult:
        request = validate_intake(payload)
        prompt = build_assessment_prompt(request)
        blocks = self.client.create_message(system=ASSESSMENT_SYSTEM_PROMPT, prompt=prompt)
        text = extract_text(blocks)
        analysis = build_analysis(parse_analysis(text), self.catalog)
        LOGGER.info(
            "Assessment analysed: %d recommendation(s) for %s",
            len(analysis.recommendations),
            request.business_profile.industry,
        )
        return analysis

    def submit(self, payload: Any) -> str:
        """Record a completed assessment lead and return its identifier."""
        data = payload if isinstance(payload, dict) else {}
        assessment_data = data.get("assessmentData") or {}
        if not isinstance(assessment_data, dict) or not assessment_data.get("contactInfo") or not data.get("analysis"):
            raise MissingFieldsError("Missing required data")
        try:
            submission = SubmitRequest.model_validate(data)
        except ValidationError as exc:
            LOGGER.info("Assessment submission failed validation: %s", exc)
            raise InvalidAssessmentError() from exc

        assessment_id = new_assessment_id()
        form = submission.assessment_data
        contact = form.contact_info
        analysis = submission.analysis
        primary = analysis.primary_recommendation()
        savings = analysis.potential_savings.annual if analysis.potential_savings else None
        LOGGER.info(
            "Assessment lead %s: %s %s <%s> at %s, industry=%s, volume=%s pages/month, "
            "budget=%s, primary=%s, annual savings=%s",
            assessment_id,
            contact.first_name,
            contact.last_name,
            contact.email,
            contact.company,
            form.business_profile.industry,
            form.print_volume.total_pages,
            form.budget_timeline.budget_range,
            primary.product.name if primary else None,
            savings,
        )
        return assessment_id

    def contact(self, payload: Any) -> ContactRequest:
        try:
            enquiry = ContactRequest.model_validate(payload)
        except ValidationError as exc:
            LOGGER.info("Contact form failed validation: %s", exc)
            raise InvalidFormDataError() from exc
        LOGGER.info(
            "Contact enquiry from %s <%s>, phone=%s, organisation=%s: %s",
            enquiry.name,
            enquiry.email,
            enquiry.phone or "Not provided",
            enquiry.organisation or "Not provided",
            enquiry.message,
        )
        return enquiry

    def health(self) -> Dict[str, Any]:
        return {
            "status": "ok",
            "ai_service": "configured" if self.client.configured else "not_configured",
            "catalog_version": self.catalog.version,
            "product_count": len(self.catalog),
        }
