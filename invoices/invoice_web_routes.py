import logging
from flask import Blueprint, jsonify, request, make_response, send_file, current_app
from invoices.invoice_service import InvoiceService
from settings.company_settings import Company
from templates.invoice_renderer import render_invoice_html
from templates.pdf_service import PDFService
from user.exceptions import ResourceNotFoundException
from user.jwt_middleware import login_required, current_user_id

logger = logging.getLogger(__name__)

bp = Blueprint("invoice_web", __name__)


def _base_url():
    return current_app.config.get("BASE_URL") or request.host_url.rstrip("/")


def _render(invoice_id, copies=None, download_mode=False):
    user_id = current_user_id()
    invoice = InvoiceService.get_invoice(user_id, invoice_id)
    company = Company.query.filter_by(user_id=user_id).first()
    return invoice, render_invoice_html(
        invoice,
        invoice.customer,
        company,
        _base_url(),
        copies=copies,
        download_mode=download_mode,
    )


@bp.route("/generate-pdf", methods=["POST"])
@login_required
def generate_invoice_html():
    """
    Render the printable invoice document inline. Optional copies selects the
    labelled copies to print, e.g. ["original", "duplicate", "triplicate"].
    """
    payload = request.get_json() or {}
    invoice_id = payload.get("invoice_id")
    if not invoice_id:
        return jsonify({"error": "invoice_id is required"}), 400

    copies = payload.get("copies")
    if copies is not None and not isinstance(copies, list):
        return jsonify({"error": "copies must be a list"}), 400

    try:
        invoice, html_content = _render(invoice_id, copies=copies)
    except ResourceNotFoundException as e:
        return jsonify({"error": str(e)}), 404
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        logger.exception("Error generating invoice document")
        return jsonify({"error": "Failed to generate invoice"}), 500

    response = make_response(html_content)
    response.headers["Content-Type"] = "text/html; charset=utf-8"
    response.headers["Content-Disposition"] = f'inline; filename="invoice-{invoice.invoice_number}.html"'
    return response


@bp.route("/<int:invoice_id>/download", methods=["POST"])
@login_required
def download_invoice_pdf(invoice_id):
    """
    Generate and download PDF using weasyprint
    """
    try:
        invoice, html_content = _render(invoice_id, download_mode=True)
    except ResourceNotFoundException as e:
        return jsonify({"error": str(e)}), 404
    except Exception:
        logger.exception("Error rendering invoice %s for download", invoice_id)
        return jsonify({"error": "Failed to generate invoice"}), 500

    try:
        pdf_buffer = PDFService.html_to_pdf(html_content)
    except (ImportError, OSError):
        # Fallback to HTML download if weasyprint or its native libraries are missing
        logger.warning("weasyprint unavailable, sending invoice %s as HTML", invoice_id)
        response = make_response(html_content)
        response.headers["Content-Type"] = "text/html; charset=utf-8"
        response.headers["Content-Disposition"] = f'attachment; filename="invoice-{invoice.invoice_number}.html"'
        return response
    except Exception:
        logger.exception("Error generating PDF for invoice %s", invoice_id)
        return jsonify({"error": "Failed to generate PDF"}), 500

    return send_file(
        pdf_buffer,
        as_attachment=True,
        download_name=f"invoice-{invoice.invoice_number}.pdf",
        mimetype="application/pdf",
    )
