"""Prompt templates for the print assessment analysis."""
from __future__ import annotations

from typing import Dict, Iterable

from .models import AnalyzeRequest

PRODUCT_IDS = ("hp-e47528f", "hp-e78625dn", "hp-e78630dn", "hp-e78635dn", "hp-e87750dn")

ASSESSMENT_SYSTEM_PROMPT = """You are an expert print infrastructure consultant for Dreaming Print Solutions, Australia's first Indigenous-owned enterprise printer dealer and authorised HP Partner.

Your role is to analyse business print environments and recommend the best solution from our SPECIFIC product range. You have deep expertise in HP enterprise multifunction printers and Australian business environments.

## OUR COMPLETE PRODUCT RANGE (5 PRODUCTS ONLY)

You MUST recommend from these 5 products.

### 1. HP Color LaserJet Managed MFP E47528f (Product ID: "hp-e47528f")
The only A4 option, for small teams who don't need A3.
- Format: A4 only (cannot print A3)
- Speed: 27 ppm black/colour
- Volume range: 1,500 - 7,500 pages/month
- Duty cycle: 65,000 pages/month max
- Scanning: 60 ppm simplex, 120 ipm duplex, 150-sheet ADF
Recommend when: volume under 7,500 pages, no A3, small team (1-20 employees), budget-conscious but needs enterprise security.
Do not recommend if: A3 needed, volume over 7,500/month, or high-speed scanning.
Estimated price range: $3,000 - $5,000

### 2. HP Color LaserJet Managed MFP E78625dn (Product ID: "hp-e78625dn")
Entry-level A3, great value for medium offices.
- Format: A3 and A4
- Speed: 25 ppm (upgradeable to 30 or 35 ppm via license)
- Volume range: 3,000 - 20,000 pages/month
- Duty cycle: 110,000 pages/month max
- Scanning: 100 ppm simplex, 200 ipm duplex, 200-sheet ADF
Recommend when: A3 needed at moderate volume (3K-15K/month), medium office (20-100 employees), wants a speed upgrade path.
Do not recommend if: volume consistently over 15K, maximum speed needed now.
Estimated price range: $8,000 - $15,000

### 3. HP Color LaserJet Managed MFP E78630dn (Product ID: "hp-e78630dn")
Mid-range A3 with faster output for busy offices.
- Format: A3 and A4
- Speed: 30 ppm (upgradeable to 35 ppm)
- Volume range: 5,000 - 20,000 pages/month
- Duty cycle: 110,000 pages/month max
Recommend when: 5K-20K pages/month, speed matters, busy workgroup, 50-200 employees.
Do not recommend if: volume under 5K (overkill) or over 25K (consider E78635dn).
Estimated price range: $12,000 - $20,000

### 4. HP Color LaserJet Managed MFP E78635dn (Product ID: "hp-e78635dn")
Top of the E786 series, maximum speed for high-volume departments.
- Format: A3 and A4
- Speed: 35 ppm
- Volume range: 10,000 - 30,000 pages/month
- Duty cycle: 150,000 pages/month max
- Extras: booklet, staple and punch finishing
Recommend when: 10K-30K pages/month, speed is critical, 100+ employees, finishing needed.
Do not recommend if: volume under 10K or over 30K.
Estimated price range: $18,000 - $28,000

### 5. HP Color LaserJet Managed MFP E87750dn (Product ID: "hp-e87750dn")
Production-class machine for print rooms and enterprise.
- Format: A3 and A4
- Speed: 50 ppm (upgradeable to 60 or 70 ppm via license)
- Volume range: 20,000 - 100,000 pages/month
- Duty cycle: 200,000 pages/month max
- Scanning: 130 ppm simplex, 260 ipm duplex, 250-sheet ADF
Recommend when: 20K-100K pages/month, central print room, 500+ employees, complex finishing.
Do not recommend if: volume under 15K or a small-medium office.
Estimated price range: $35,000 - $60,000

## SELECTION GUIDE

1. Volume first: under 7,500 and no A3 -> E47528f; 3K-15K with A3 -> E78625dn; 5K-20K needing speed -> E78630dn; 10K-30K -> E78635dn; 20K+ -> E87750dn.
2. Any A3 need rules out E47528f.
3. Organisation size: small -> E47528f or E78625dn; medium -> E78625dn or E78630dn; large -> E78630dn or E78635dn; enterprise -> E78635dn or E87750dn.
4. Every model carries HP Wolf Enterprise Security and Common Criteria certification.

## GUIDELINES

1. Be decisive: recommend ONE primary product with clear reasoning.
2. Match volume carefully; do not over-spec or under-spec.
3. If the customer is near the top of a product's range, recommend the next tier.
4. Price realistically using the ranges above.
5. For government buyers, mention IPP compliance benefits.

## OUTPUT FORMAT

Respond with valid JSON only. Do not write any text before or after the JSON object. The JSON MUST match this structure:
{
  "executiveSummary": "2-3 sentence summary of the main recommendation and why it fits",
  "currentCostEstimate": {
    "monthly": number,
    "annual": number,
    "breakdown": {"toner": number, "paper": number, "maintenance": number, "energy": number}
  },
  "potentialSavings": {"monthly": number, "annual": number, "percentage": number},
  "recommendations": [
    {
      "productId": string (MUST be one of: <product-ids>),
      "matchScore": number (0-100),
      "reasons": ["reason 1", "reason 2", "reason 3"],
      "estimatedCost": number,
      "paybackPeriodMonths": number,
      "priority": "primary" | "alternative" | "budget"
    }
  ],
  "workflowInsights": [
    {
      "category": "efficiency" | "security" | "cost" | "sustainability" | "productivity",
      "title": "Short title",
      "description": "Detailed explanation",
      "impact": "high" | "medium" | "low"
    }
  ],
  "securityConsiderations": ["consideration 1", "consideration 2"],
  "roiProjection": {
    "breakevenMonths": number,
    "threeYearSavings": number,
    "fiveYearSavings": number,
    "annualizedROI": number
  },
  "industryBenchmarks": {
    "averageCostPerPage": number,
    "typicalSavings": "description",
    "adoptionTrend": "description"
  }
}
List recommendations in priority order, primary first."""

ASSESSMENT_SYSTEM_PROMPT = ASSESSMENT_SYSTEM_PROMPT.replace("<product-ids>", ", ".join(PRODUCT_IDS))

INDUSTRY_LABELS = {
    "government-federal": "Federal Government",
    "government-state": "State Government",
    "government-local": "Local Government",
    "education": "Education",
    "healthcare": "Healthcare",
    "legal": "Legal",
    "finance": "Finance & Banking",
    "manufacturing": "Manufacturing",
    "professional-services": "Professional Services",
    "not-for-profit": "Not-for-Profit",
    "indigenous-business": "Indigenous Business",
    "retail": "Retail",
    "hospitality": "Hospitality",
    "construction": "Construction",
    "other": "Other",
}

ORG_SIZE_LABELS = {
    "small": "Small (1-20 employees)",
    "medium": "Medium (21-100 employees)",
    "large": "Large (101-500 employees)",
    "enterprise": "Enterprise (500+ employees)",
}

ISSUE_LABELS = {
    "high-running-costs": "High running costs",
    "frequent-breakdowns": "Frequent breakdowns",
    "slow-print-speed": "Slow print speed",
    "poor-print-quality": "Poor print quality",
    "security-concerns": "Security concerns",
    "no-scanning": "No/poor scanning",
    "outdated-features": "Outdated features",
    "end-of-life": "End of life/support",
    "no-mobile-printing": "No mobile printing",
    "limited-paper-capacity": "Limited paper capacity",
    "poor-support": "Poor vendor support",
    "no-duplex": "No automatic duplex",
    "other": "Other issues",
}

CONTRACT_LABELS = {
    "owned": "Owned outright",
    "leased": "Leased",
    "managed-print": "Managed Print Service",
    "unknown": "Unknown",
}

SCANNING_LABELS = {
    "none": "None",
    "occasional": "Occasional (few times per week)",
    "regular": "Regular (daily)",
    "high-volume": "High volume",
}

SECURITY_LABELS = {
    "basic": "Basic",
    "standard": "Standard (PIN/badge access)",
    "high": "High (encryption, audit trails)",
    "government-grade": "Government-grade (Common Criteria)",
}

BUDGET_LABELS = {
    "under-5k": "Under $5,000",
    "5k-10k": "$5,000 - $10,000",
    "10k-20k": "$10,000 - $20,000",
    "20k-50k": "$20,000 - $50,000",
    "over-50k": "Over $50,000",
    "flexible": "Flexible",
}

URGENCY_LABELS = {
    "immediate": "Immediate (within 2 weeks)",
    "1-3-months": "1-3 months",
    "3-6-months": "3-6 months",
    "planning": "Planning/researching",
}

PROCUREMENT_LABELS = {
    "government": "Government/Public Sector",
    "corporate": "Corporate/Enterprise",
    "sme": "Small-Medium Business",
    "indigenous-business": "Indigenous Business",
}

PREFERENCE_LABELS = {
    "purchase": "Purchase (outright)",
    "lease": "Lease",
    "managed-print": "Managed Print Service",
    "undecided": "Undecided",
}


def _label(labels: Dict[str, str], value: str) -> str:
    return labels.get(value, value)


def _labels(labels: Dict[str, str], values: Iterable[str]) -> str:
    return ", ".join(_label(labels, value) for value in values)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def build_assessment_prompt(request: AnalyzeRequest) -> str:
    """Render the validated intake as the user message.

    Output depends only on ``request``: no clock, no randomness.
    """
    profile = request.business_profile
    setup = request.current_setup
    volume = request.print_volume
    workflow = request.workflow_needs
    budget = request.budget_timeline

    a3_note = "(A3 REQUIRED)" if volume.needs_a3 else "(No A3 - consider E47528f)"
    color_pct = _number(volume.color_percentage)
    mono_pct = _number(100 - volume.color_percentage)

    lines = [
        "Analyze this business and recommend the BEST product from our 5-product range:",
        "",
        "## BUSINESS PROFILE",
        f"- Industry: {_label(INDUSTRY_LABELS, profile.industry)}",
        f"- Organisation Size: {_label(ORG_SIZE_LABELS, profile.org_size)}",
        f"- Employee Count: {profile.employee_count}",
        f"- Location: {profile.location}",
        "",
        "## CURRENT PRINT SETUP",
        f"- Current Brand: {setup.brand}",
        f"- Current Model: {setup.model or 'Not specified'}",
        f"- Equipment Age: {_number(setup.age_years)} years",
        f"- Issues Experienced: {_labels(ISSUE_LABELS, setup.issues)}",
        f"- Acquisition Type: {_label(CONTRACT_LABELS, setup.contract_type)}",
        "",
        "## PRINT VOLUME (KEY DECISION FACTOR)",
        f"- Total Monthly Pages: {volume.total_pages}",
        f"- A4 Pages: {volume.monthly_a4}/month",
        f"- A3 Pages: {volume.monthly_a3}/month {a3_note}",
        f"- Color Ratio: {color_pct}% color, {mono_pct}% B&W",
        f"- Estimated Color Pages: {volume.color_pages}/month",
        f"- Estimated B&W Pages: {volume.mono_pages}/month",
    ]
    if volume.peak_periods:
        lines.append(f"- Peak Periods: {volume.peak_periods}")
    lines.extend(
        [
            "",
            "## WORKFLOW REQUIREMENTS",
            f"- Document Types: {', '.join(workflow.document_types)}",
            f"- Scanning Needs: {_label(SCANNING_LABELS, workflow.scanning_needs)}",
            f"- Security Level: {_label(SECURITY_LABELS, workflow.security_level)}",
            f"- Cloud Integration Required: {_yes_no(workflow.cloud_integration)}",
            f"- Mobile Printing Required: {_yes_no(workflow.mobile_printing)}",
            "",
            "## BUDGET & TIMELINE",
            f"- Budget Range: {_label(BUDGET_LABELS, budget.budget_range)}",
            f"- Timeline: {_label(URGENCY_LABELS, budget.urgency)}",
            f"- Procurement Type: {_label(PROCUREMENT_LABELS, budget.procurement_type)}",
            f"- Acquisition Preference: {_label(PREFERENCE_LABELS, budget.preference)}",
            "",
            "## YOUR TASK",
            "",
            "Based on the above, select the BEST product from our 5-product range:",
            "1. E47528f (A4 only, 1.5K-7.5K/month, $3K-5K)",
            "2. E78625dn (A3, 3K-20K/month, $8K-15K)",
            "3. E78630dn (A3, 5K-20K/month, faster, $12K-20K)",
            "4. E78635dn (A3, 10K-30K/month, fastest E786, $18K-28K)",
            "5. E87750dn (A3, 20K-100K/month, production, $35K-60K)",
            "",
            "Provide:",
            "1. One PRIMARY recommendation with 85%+ match score if it's clearly the right fit",
            "2. One ALTERNATIVE if there's a close second choice",
            "3. Cost analysis comparing their current setup to the new solution",
            "4. Specific workflow insights for their industry",
            "5. ROI projection with realistic payback period",
        ]
    )
    return "\n".join(lines)
