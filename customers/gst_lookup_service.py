import re
import logging
import requests
from flask import current_app
from user.exceptions import GstLookupException

logger = logging.getLogger(__name__)

GSTIN_PATTERN = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z]{1}[1-9A-Z]{1}Z[0-9A-Z]{1}$")

STATE_CODES = {
    "01": "Jammu and Kashmir", "02": "Himachal Pradesh", "03": "Punjab",
    "04": "Chandigarh", "05": "Uttarakhand", "06": "Haryana",
    "07": "Delhi", "08": "Rajasthan", "09": "Uttar Pradesh",
    "27": "Maharashtra", "29": "Karnataka", "33": "Tamil Nadu",
}


def validate_gstin(gst_number):
    """Raise ValueError unless gst_number is a well-formed 15 character GSTIN"""
    if not gst_number:
        raise ValueError("GST Number is required")
    if len(gst_number) != 15:
        raise ValueError("GST Number must be 15 characters long")
    if not GSTIN_PATTERN.match(gst_number):
        raise ValueError("Invalid GST Number format")


class GstLookupService:
    @staticmethod
    def lookup(gst_number):
        """
        Resolve taxpayer details for a GSTIN.

        Without an API key (or with key "mock") sample data is returned so the
        signup and customer forms stay usable in development.
        """
        gst_number = (gst_number or "").strip().upper()
        validate_gstin(gst_number)

        api_key = current_app.config.get("GST_API_KEY")
        if not api_key or api_key == "mock":
            logger.warning("GST_API_KEY not configured, serving mock GST data")
            return GstLookupService.mock_data(gst_number)

        try:
            response = requests.post(
                current_app.config["GST_API_URL"],
                data={"gstNo": gst_number, "key_secret": api_key},
                timeout=current_app.config["GST_API_TIMEOUT"],
            )
        except requests.exceptions.RequestException as e:
            logger.error("GST API request failed: %s", str(e))
            raise GstLookupException("Failed to fetch GST details. Please try again.", 502)

        if not response.ok:
            text = response.text or ""
            logger.error("GST API returned status %s: %s", response.status_code, text)
            if "quota" in text or "exhausted" in text:
                raise GstLookupException("GST API quota exhausted", 429)
            raise GstLookupException("Failed to fetch GST details", response.status_code)

        try:
            data = response.json()
        except ValueError:
            raise GstLookupException("Invalid response from GST API", 500)

        if data.get("error") is True:
            raise GstLookupException(data.get("message") or "Invalid GST Number or not found", 404)

        taxpayer = data.get("taxpayerInfo")
        if not taxpayer:
            raise GstLookupException("Invalid response structure from API", 500)

        return GstLookupService.format_taxpayer(taxpayer)

    @staticmethod
    def format_taxpayer(taxpayer):
        pradr = taxpayer.get("pradr") or {}
        addr = pradr.get("addr") or {}

        street = ", ".join(part for part in (addr.get("bno"), addr.get("st"), addr.get("loc")) if part)
        formatted_address = ", ".join(
            part for part in (street, addr.get("dst"), addr.get("stcd"), addr.get("pncd")) if part
        )

        return {
            "business_name": taxpayer.get("tradeNam") or taxpayer.get("lgnm") or "",
            "address": formatted_address or pradr.get("adr") or "",
            "legal_name": taxpayer.get("lgnm") or "",
            "status": taxpayer.get("sts") or "",
            "registration_date": taxpayer.get("rgdt") or "",
            "taxpayer_type": taxpayer.get("ctb") or "",
            "state": addr.get("stcd") or "",
            "city": addr.get("dst") or "",
            "pincode": addr.get("pncd") or "",
        }

    @staticmethod
    def mock_data(gst_number):
        state = STATE_CODES.get(gst_number[:2], "Unknown State")
        return {
            "business_name": "Sample Business Private Limited",
            "address": f"123, Business Tower, Main Road, Sample City, {state}, 560001",
            "legal_name": "SAMPLE BUSINESS PRIVATE LIMITED",
            "status": "Active",
            "registration_date": "01/01/2020",
            "taxpayer_type": "Regular",
            "state": state,
            "city": "Sample City",
            "pincode": "560001",
        }
