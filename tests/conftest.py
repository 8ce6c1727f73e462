"""Shared fixtures and stubs."""

import copy
import json
from pathlib import Path

import pytest

from print_assessment.catalog import load_catalog

DATA_DIR = Path(__file__).resolve().parents[1] / "data"

VALID_REQUEST = {
    "businessProfile": {
        "industry": "government-state",
        "orgSize": "medium",
        "employeeCount": 80,
        "location": "Brisbane, QLD",
    },
    "currentSetup": {
        "brand": "Canon",
        "model": "iR-ADV C5535",
        "ageYears": 6,
        "issues": ["frequent-breakdowns", "high-running-costs"],
        "contractType": "leased",
    },
    "printVolume": {
        "monthlyA4": 5000,
        "monthlyA3": 1200,
        "colorPercentage": 30,
        "peakPeriods": "End of financial year",
    },
    "workflowNeeds": {
        "documentTypes": ["General office documents", "Financial reports"],
        "scanningNeeds": "regular",
        "securityLevel": "high",
        "cloudIntegration": True,
        "mobilePrinting": False,
    },
    "budgetTimeline": {
        "budgetRange": "10k-20k",
        "urgency": "1-3-months",
        "procurementType": "government",
        "preference": "lease",
    },
}

CONTACT_INFO = {
    "firstName": "Alex",
    "lastName": "Nguyen",
    "email": "alex.nguyen@example.gov.au",
    "phone": "0412345678",
    "company": "Department of Example",
    "jobTitle": "IT Manager",
    "preferredContact": "email",
}

ANALYSIS_REPLY = {
    "executiveSummary": "The E78630dn fits your A3 volume and security needs.",
    "currentCostEstimate": {
        "monthly": 1450,
        "annual": 17400,
        "breakdown": {"toner": 900, "paper": 250, "maintenance": 250, "energy": 50},
    },
    "potentialSavings": {"monthly": 400, "annual": 4800, "percentage": 27.5},
    "recommendations": [
        {
            "productId": "hp-e78630dn",
            "matchScore": 91,
            "reasons": ["A3 capable", "Fits 6K pages/month", "Government-grade security"],
            "estimatedCost": 16000,
            "paybackPeriodMonths": 18,
            "priority": "primary",
        },
        {
            "productId": "hp-e78625dn",
            "matchScore": 78,
            "reasons": ["Lower upfront cost"],
            "estimatedCost": 11000,
            "paybackPeriodMonths": 14,
            "priority": "alternative",
        },
    ],
    "workflowInsights": [
        {
            "category": "security",
            "title": "Secure release",
            "description": "Enable badge release for sensitive reports.",
            "impact": "high",
        }
    ],
    "securityConsiderations": ["Enable HP Wolf Enterprise Security policies"],
    "roiProjection": {
        "breakevenMonths": 18,
        "threeYearSavings": 14400,
        "fiveYearSavings": 24000,
        "annualizedROI": 22,
    },
    "industryBenchmarks": {
        "averageCostPerPage": 0.08,
        "typicalSavings": "20-30% for government fleets",
        "adoptionTrend": "Consolidation onto A3 MFPs",
    },
}


def valid_request():
    return copy.deepcopy(VALID_REQUEST)


def text_blocks(text):
    return [{"type": "text", "text": text}]


class StubResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text or (json.dumps(payload) if payload is not None else "")

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


class StubSession:
    """Records posts instead of touching the network."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


class StubClient:
    """Stands in for AnthropicClient at the service boundary."""

    def __init__(self, blocks=None, exc=None, configured=True):
        self.blocks = blocks if blocks is not None else text_blocks(json.dumps(ANALYSIS_REPLY))
        self.exc = exc
        self.configured = configured
        self.calls = []

    def create_message(self, system, prompt):
        self.calls.append({"system": system, "prompt": prompt})
        if self.exc is not None:
            raise self.exc
        return self.blocks


@pytest.fixture(scope="session")
def catalog():
    return load_catalog(DATA_DIR)


@pytest.fixture
def request_payload():
    return valid_request()
