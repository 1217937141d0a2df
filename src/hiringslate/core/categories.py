"""Static keyword profiles for the roles being hired."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, get_args

Category = Literal[
    "Full Stack Developer",
    "Marketing Specialist",
    "Accounting",
    "Cybersecurity Analyst",
    "Data Scientist",
]

# Iteration order for scoring and slate selection.
TARGET_CATEGORIES: tuple[Category, ...] = get_args(Category)


@dataclass(frozen=True)
class CategoryProfile:
    """Role-title and skill keywords describing one open role."""

    role_keywords: tuple[str, ...]
    skill_keywords: tuple[str, ...]


CATEGORY_PROFILES: dict[Category, CategoryProfile] = {
    "Full Stack Developer": CategoryProfile(
        role_keywords=(
            "full stack developer",
            "senior full stack",
            "frontend engineer",
            "backend engineer",
            "software engineer",
        ),
        skill_keywords=(
            "react",
            "node",
            "typescript",
            "python",
            "java",
            "sql",
            "postgresql",
            "mongodb",
            "docker",
            "kubernetes",
            "aws",
            "gcp",
            "azure",
            "rest apis",
            "graphql",
            "next js",
            "redux",
            "django",
            "flask",
        ),
    ),
    "Marketing Specialist": CategoryProfile(
        role_keywords=(
            "marketing specialist",
            "marketing manager",
            "digital marketing",
            "growth",
            "brand",
            "content",
            "seo",
            "sem",
            "ppc",
            "social media",
        ),
        skill_keywords=(
            "seo",
            "sem",
            "google ads",
            "facebook ads",
            "content",
            "copywriting",
            "email",
            "crm",
            "analytics",
            "ga4",
            "hubspot",
            "marketo",
            "social",
        ),
    ),
    "Accounting": CategoryProfile(
        role_keywords=(
            "accountant",
            "accounting",
            "accounts payable",
            "accounts receivable",
            "financial analyst",
            "bookkeeper",
            "controller",
            "tax",
        ),
        skill_keywords=(
            "accounting",
            "excel",
            "gaap",
            "quickbooks",
            "sap",
            "oracle",
            "financial reporting",
            "reconciliation",
            "tax",
        ),
    ),
    "Cybersecurity Analyst": CategoryProfile(
        role_keywords=(
            "cybersecurity",
            "security engineer",
            "security analyst",
            "security operations",
            "soc",
            "information security",
            "appsec",
        ),
        skill_keywords=(
            "security",
            "network security",
            "siem",
            "threat",
            "vulnerability",
            "splunk",
            "ids",
            "ips",
            "owasp",
            "incident response",
        ),
    ),
    "Data Scientist": CategoryProfile(
        role_keywords=(
            "data scientist",
            "ml engineer",
            "machine learning engineer",
            "research scientist",
            "ai engineer",
        ),
        skill_keywords=(
            "python",
            "pandas",
            "numpy",
            "scikit",
            "sklearn",
            "pytorch",
            "tensorflow",
            "sql",
            "nlp",
            "computer vision",
            "statistics",
            "r",
        ),
    ),
}
