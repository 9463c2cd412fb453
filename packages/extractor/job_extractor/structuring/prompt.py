"""Extraction prompt construction.

The prompt carries the page text (hard-cut to a fixed character budget), the
source URL, an optional company hint, and a literal JSON template of the
record schema the model must fill in.
"""

from __future__ import annotations

from datetime import date
from string import Template

PROMPT_CHAR_BUDGET = 8000

_TEMPLATE = Template("""\
You are a job posting data extraction expert. Extract all relevant information from the following job posting and return it as a JSON object.

IMPORTANT: Return ONLY valid JSON, no explanations or markdown formatting outside the JSON.

$company_context

Job Posting Content:
$content

Source URL: $url

Extract and structure the data in this EXACT format:
{
  "title": "Full job title exactly as posted",
  "subtitle": "A catchy subtitle summarizing the opportunity",
  "postedDate": "YYYY-MM-DD format (use today's date if not found: $today)",
  "postedBy": "$posted_by",
  "location": "City name or 'Remote' or 'Pan India'",
  "jobType": "Full-time/Part-time/Contract/Internship",
  "applyUrl": "$url",
  "fullDescription": "Comprehensive 2-3 sentence description of the role and opportunity",
  "jobDetails": {
    "role": "Specific role title",
    "category": "Off Campus/On Campus/IT Services/Finance/etc",
    "qualification": "Required education (e.g., Graduation / Post Graduation)",
    "batch": "Target graduation year like '2024/2025' or 'N/A'",
    "experience": "Experience level (e.g., 'Freshers', '2-5 years')",
    "salary": "Salary range like '4 - 9 LPA' or 'Not disclosed'",
    "lastDate": "Application deadline or 'ASAP' or 'Not specified'"
  },
  "eligibilityCriteria": [
    "Criterion 1",
    "Criterion 2"
  ],
  "responsibilities": [
    { "task": "Responsibility 1" },
    { "task": "Responsibility 2" }
  ],
  "interviewTips": [
    { "tip": "Helpful tip 1" },
    { "tip": "Helpful tip 2" }
  ],
  "selectionProcess": [
    { "stage": "Stage 1" },
    { "stage": "Stage 2" }
  ],
  "careerGrowth": {
    "description": "Career progression opportunities at this company",
    "futureRoles": [
      "Next role 1",
      "Next role 2"
    ]
  },
  "companyInfo": {
    "name": "$company_name",
    "foundedYear": "Year (e.g. 1998) or 'Not specified'",
    "employeeCount": "Number (e.g. 5000+) or 'Not specified'",
    "about": "2-3 sentence company description",
    "technologies": [
      "Tech 1",
      "Tech 2"
    ]
  },
  "faqs": [
    {
      "question": "Common question 1",
      "answer": "Detailed answer"
    }
  ]
}

GUIDELINES:
1. Extract actual information from the posting where available
2. For missing fields, provide reasonable defaults or industry-standard information based on the job title and company.
3. If the content is empty or blocked, use your knowledge about "$company_subject" and the job title to GENERATE plausible details.
4. Interview tips should be relevant to the specific role/company
5. Selection process should reflect typical hiring for this role
6. Career growth should be realistic based on the role level
7. All arrays should have at least 1 item
8. Dates should be in the specified formats
9. DO NOT include an "id" field
10. Return ONLY the JSON object, nothing else""")


def truncate_content(text: str, budget: int = PROMPT_CHAR_BUDGET) -> str:
    """Return the first *budget* characters of *text* (no sentence awareness)."""
    return text[:budget]


def build_extraction_prompt(
    text: str,
    url: str,
    company_name: str | None = None,
    *,
    today: date | None = None,
    char_budget: int = PROMPT_CHAR_BUDGET,
) -> str:
    """Compose the model instruction for one job posting."""
    company_context = (
        f'The company name is "{company_name}". '
        "Use this to infer company details if not explicitly stated."
        if company_name
        else ""
    )
    return _TEMPLATE.substitute(
        company_context=company_context,
        content=truncate_content(text or "", char_budget),
        url=url,
        today=(today or date.today()).isoformat(),
        posted_by=f"{company_name or 'Company'} Careers",
        company_name=company_name or "Company name",
        company_subject=company_name or "the company",
    )
