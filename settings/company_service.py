import re
from src.extensions import db
from settings.company_settings import Company, BankAccount

PHONE_PATTERN = re.compile(r"^[\d\s+\-()]*\d[\d\s+\-()]*\d[\d\s+\-()]*\d$")
MIN_PASSWORD_LENGTH = 6

TEXT_FIELDS = (
    "company_name", "company_type", "company_address", "gstin", "phone1", "phone2",
    "bank1_name", "bank1_account", "bank1_ifsc", "bank2_name", "bank2_account", "bank2_ifsc",
)


def validate_phone_number(phone):
    digits_only = re.sub(r"\D", "", phone or "")
    return bool(PHONE_PATTERN.match(phone or "")) and 10 <= len(digits_only) <= 15


class CompanyService:
    @staticmethod
    def validate_company_payload(data):
        """
        Raise ValueError with a user-facing message when the company/bank part
        of a signup or profile payload is incomplete.
        """
        for field in TEXT_FIELDS:
            value = data.get(field)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{field} must be a string")

        if not data.get("company_name") or not data.get("gstin"):
            raise ValueError("Company name and GSTIN are required")

        phone1 = data.get("phone1")
        if not phone1:
            raise ValueError("Primary phone number is required")
        if not validate_phone_number(phone1):
            raise ValueError("Invalid primary phone number format")

        phone2 = data.get("phone2")
        if phone2 and not validate_phone_number(phone2):
            raise ValueError("Invalid secondary phone number format")

        if not data.get("bank1_name") or not data.get("bank1_account") or not data.get("bank1_ifsc"):
            raise ValueError("Bank Account 1 details are required")

        if CompanyService._num_bank_accounts(data) == 2:
            if not data.get("bank2_name") or not data.get("bank2_account") or not data.get("bank2_ifsc"):
                raise ValueError("Bank Account 2 details are required")

    @staticmethod
    def _num_bank_accounts(data):
        try:
            return int(data.get("num_bank_accounts") or 1)
        except (TypeError, ValueError):
            raise ValueError("num_bank_accounts must be 1 or 2")

    @staticmethod
    def build_bank_accounts(data):
        accounts = [
            BankAccount(
                position=0,
                bank_name=data["bank1_name"],
                account_number=data["bank1_account"],
                ifsc_code=data["bank1_ifsc"],
            )
        ]
        if CompanyService._num_bank_accounts(data) == 2:
            accounts.append(
                BankAccount(
                    position=1,
                    bank_name=data["bank2_name"],
                    account_number=data["bank2_account"],
                    ifsc_code=data["bank2_ifsc"],
                )
            )
        return accounts

    @staticmethod
    def apply_company_fields(company, data):
        company.company_name = data["company_name"]
        company.company_type = data.get("company_type") or ""
        company.company_address = data.get("company_address") or ""
        company.gstin = data["gstin"].upper()
        company.phone1 = data["phone1"]
        company.phone2 = data.get("phone2") or ""

    @staticmethod
    def create_company(user, data):
        company = Company(user=user)
        CompanyService.apply_company_fields(company, data)
        company.bank_accounts = CompanyService.build_bank_accounts(data)
        db.session.add(company)
        return company

    @staticmethod
    def update_company(user, data):
        company = user.company
        if company is None:
            return CompanyService.create_company(user, data)
        CompanyService.apply_company_fields(company, data)
        # delete-orphan cascade drops the previous accounts
        company.bank_accounts = CompanyService.build_bank_accounts(data)
        return company

    @staticmethod
    def serialize_profile(user):
        company = user.company
        profile = {
            "id": user.id,
            "email": user.email,
            "created_at": user.created_at.isoformat() if user.created_at else None,
            "updated_at": user.updated_at.isoformat() if user.updated_at else None,
        }
        if company:
            profile.update({
                "company_name": company.company_name,
                "company_type": company.company_type,
                "company_address": company.company_address,
                "gstin": company.gstin,
                "phone1": company.phone1,
                "phone2": company.phone2,
                "bank_accounts": [
                    {
                        "bank_name": b.bank_name,
                        "account_number": b.account_number,
                        "ifsc_code": b.ifsc_code,
                    }
                    for b in company.bank_accounts
                ],
            })
        return profile
