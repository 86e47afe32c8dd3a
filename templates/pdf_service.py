import io
import logging

logger = logging.getLogger(__name__)


class PDFService:
    @staticmethod
    def html_to_pdf(html_content):
        """
        Convert a rendered invoice document to PDF bytes using weasyprint.
        Raises ImportError or OSError when weasyprint or its native libraries are missing.
        """
        from weasyprint import HTML

        pdf_buffer = io.BytesIO()
        HTML(string=html_content).write_pdf(pdf_buffer)
        logger.debug("Rendered PDF of %d bytes", pdf_buffer.tell())
        pdf_buffer.seek(0)
        return pdf_buffer
