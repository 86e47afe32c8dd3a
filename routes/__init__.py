import logging

logger = logging.getLogger(__name__)


def register_routes(app):
    try:
        from user.user_routes import bp as user_bp
        app.register_blueprint(user_bp, url_prefix="/api/auth")
    except ImportError:
        logger.exception("Failed to import user_routes")

    try:
        from user.password_reset_routes import bp as password_reset_bp
        app.register_blueprint(password_reset_bp, url_prefix="/api/auth")
    except ImportError:
        logger.exception("Failed to import password_reset_routes")

    try:
        from settings.settings_routes import bp as settings_bp
        app.register_blueprint(settings_bp, url_prefix="/api/profile")
    except ImportError:
        logger.exception("Failed to import settings_routes")

    try:
        from customers.customer_routes import bp as customer_bp
        app.register_blueprint(customer_bp, url_prefix="/api/customers")
    except ImportError:
        logger.exception("Failed to import customer_routes")

    try:
        from customers.gst_lookup_routes import bp as gst_lookup_bp
        app.register_blueprint(gst_lookup_bp, url_prefix="/api/gst-lookup")
    except ImportError:
        logger.exception("Failed to import gst_lookup_routes")

    try:
        from products.product_routes import bp as product_bp
        app.register_blueprint(product_bp, url_prefix="/api/products")
    except ImportError:
        logger.exception("Failed to import product_routes")

    try:
        from invoices.invoice_routes import bp as invoice_bp
        app.register_blueprint(invoice_bp, url_prefix="/api/invoices")
    except ImportError:
        logger.exception("Failed to import invoice_routes")

    try:
        from invoices.invoice_web_routes import bp as invoice_web_bp
        app.register_blueprint(invoice_web_bp, url_prefix="/api/invoices")
    except ImportError:
        logger.exception("Failed to import invoice_web_routes")

    try:
        from reports.report_routes import bp as report_bp
        app.register_blueprint(report_bp, url_prefix="/api/broker")
    except ImportError:
        logger.exception("Failed to import report_routes")

    try:
        from mail_invoice.mail_routes import mail_bp
        app.register_blueprint(mail_bp, url_prefix="/api")
    except ImportError:
        logger.exception("Failed to import mail_routes")
