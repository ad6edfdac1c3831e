# services/template_service.py
from typing import List, Optional
from loguru import logger
from sqlalchemy.orm import Session

from synthdata.models.template import Template


def _column(name: str, type_: str, sensitive: bool = False) -> dict:
    return {"name": name, "type": type_, "sensitive": sensitive}


# Pre-configured schemas for common Kenyan fintech use cases
DEFAULT_TEMPLATES = [
    {
        "name": "Customer KYC",
        "description": "Know-your-customer records for retail banking onboarding",
        "category": "banking",
        "schema_json": [
            _column("customer_id", "string", True),
            _column("full_name", "string", True),
            _column("national_id", "string", True),
            _column("phone_number", "string", True),
            _column("date_of_birth", "date", True),
            _column("county", "category"),
            _column("account_type", "category"),
            _column("kyc_status", "category"),
        ],
    },
    {
        "name": "Loan Applications",
        "description": "Digital lending applications with credit scoring outcomes",
        "category": "lending",
        "schema_json": [
            _column("application_id", "string", True),
            _column("applicant_name", "string", True),
            _column("monthly_income", "number"),
            _column("loan_amount", "number"),
            _column("loan_term_months", "integer"),
            _column("credit_score", "integer"),
            _column("county", "category"),
            _column("loan_status", "category"),
        ],
    },
    {
        "name": "M-Pesa Transactions",
        "description": "Mobile money transfers, payments and withdrawals",
        "category": "mobile_money",
        "schema_json": [
            _column("transaction_id", "string", True),
            _column("sender_phone", "string", True),
            _column("receiver_phone", "string", True),
            _column("amount", "number"),
            _column("transaction_type", "category"),
            _column("agent_id", "string", True),
            _column("timestamp", "datetime"),
        ],
    },
]


class TemplateService:

    def __init__(self, db: Session):
        self.db = db

    def list_templates(self) -> List[Template]:
        """Returns the public templates ordered by name."""
        return (
            self.db.query(Template)
            .filter(Template.is_public.is_(True))
            .order_by(Template.name)
            .all()
        )

    def get_template(self, template_id: str) -> Optional[Template]:
        return (
            self.db.query(Template)
            .filter(Template.id == template_id, Template.is_public.is_(True))
            .first()
        )

    def seed_defaults(self) -> int:
        """Inserts the default catalog when the table is empty. Returns the number of rows added."""
        if self.db.query(Template).count():
            return 0
        for entry in DEFAULT_TEMPLATES:
            self.db.add(Template(is_public=True, **entry))
        self.db.commit()
        logger.info(f"Seeded {len(DEFAULT_TEMPLATES)} dataset templates.")
        return len(DEFAULT_TEMPLATES)
