import logging
from datetime import datetime
from flask import current_app
from flask_mail import Message
from jinja2 import Template
from src.extensions import mail

logger = logging.getLogger("EmailService")


RESET_EMAIL_TEMPLATE = Template("""<!DOCTYPE html>
<html>
  <head><meta charset="utf-8"></head>
  <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
    <div style="background: #667eea; padding: 30px; text-align: center; border-radius: 10px 10px 0 0;">
      <h1 style="color: white; margin: 0; font-size: 28px;">CloudBillr</h1>
    </div>
    <div style="background: #f9f9f9; padding: 40px 30px; border-radius: 0 0 10px 10px;">
      <h2 style="margin-top: 0;">Reset Your Password</h2>
      <p>We received a request to reset your password. Click the button below to create a new password:</p>
      <p style="text-align: center; margin: 35px 0;">
        <a href="{{ reset_link }}" style="background: #667eea; color: white; padding: 14px 40px; text-decoration: none; border-radius: 8px; font-weight: 600;">Reset Password</a>
      </p>
      <p>Or copy and paste this link into your browser:</p>
      <p style="word-break: break-all; background: white; padding: 12px; border: 1px solid #e0e0e0;">{{ reset_link }}</p>
      <p style="color: #999; font-size: 13px;"><strong>This link will expire in {{ expiry_minutes }} minutes.</strong></p>
      <p style="color: #999; font-size: 13px;">If you didn't request this, please ignore this email.</p>
    </div>
    <p style="text-align: center; color: #999; font-size: 12px;">&copy; {{ year }} CloudBillr. All rights reserved.</p>
  </body>
</html>""", autoescape=True)


CONTACT_EMAIL_TEMPLATE = Template("""<h1>New Contact Form Submission</h1>
<p><strong>Name:</strong> {{ name }}</p>
<p><strong>Email:</strong> {{ email }}</p>
<p><strong>Phone:</strong> {{ phone or 'Not provided' }}</p>
<hr>
<h2>Message:</h2>
<p>{{ message }}</p>""", autoescape=True)


class EmailService:
    """Outgoing mail for account recovery and the public contact form.

    Messages go through Flask-Mail, so MAIL_SUPPRESS_SEND (tests) turns every
    send into a recorded no-op.
    """

    @staticmethod
    def send_password_reset(email, reset_link, expiry_minutes=60):
        year = datetime.utcnow().year
        html = RESET_EMAIL_TEMPLATE.render(reset_link=reset_link, expiry_minutes=expiry_minutes, year=year)
        text = (
            "Reset Your Password\n\n"
            "We received a request to reset your password.\n\n"
            f"Click this link to reset your password:\n{reset_link}\n\n"
            f"This link will expire in {expiry_minutes} minutes.\n\n"
            "If you didn't request this, please ignore this email.\n\n"
            f"(c) {year} CloudBillr"
        )
        msg = Message("Reset Your Password - CloudBillr", recipients=[email], body=text, html=html)
        mail.send(msg)
        logger.info("Password reset email sent to %s", email)

    @staticmethod
    def send_contact_message(name, email, subject, message, phone=None):
        html = CONTACT_EMAIL_TEMPLATE.render(name=name, email=email, phone=phone, message=message)
        msg = Message(
            f"New Message from {name}: {subject}",
            recipients=[current_app.config["CONTACT_RECIPIENT"]],
            html=html,
            reply_to=email,
        )
        mail.send(msg)
        logger.info("Contact form message from %s forwarded", email)
