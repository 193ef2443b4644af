"""
Email Service
Forward contact messages and new applications to the team mailbox
"""

import logging
import aiosmtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import Optional
from highfive.config import settings

logger = logging.getLogger(__name__)

CONTACT_REASONS = {
    "general": "General Inquiry",
    "project": "Project Discussion",
    "partnership": "Partnership Opportunity",
    "support": "Technical Support",
    "feedback": "Feedback",
    "other": "Other",
}


class EmailService:
    """Service for sending emails"""

    @staticmethod
    async def send_email(
        to_email: str,
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
        reply_to: Optional[str] = None
    ) -> bool:
        """
        Send one email through the configured SMTP server

        Without SMTP credentials the message is printed instead
        (development mode).

        Args:
            to_email: Recipient email
            subject: Subject line
            text_body: Plain text body
            html_body: Optional HTML alternative
            reply_to: Optional Reply-To address

        Returns:
            True if email sent (or printed), False otherwise
        """
        message = MIMEMultipart("alternative")
        message["Subject"] = subject
        message["From"] = settings.EMAIL_FROM
        message["To"] = to_email
        if reply_to:
            message["Reply-To"] = reply_to

        message.attach(MIMEText(text_body, "plain"))
        if html_body:
            message.attach(MIMEText(html_body, "html"))

        if not (settings.SMTP_HOST and settings.SMTP_USER and settings.SMTP_PASSWORD):
            # Development mode - no SMTP configured
            print(f"\n--- EMAIL (Development Mode) ---")
            print(f"To: {to_email}")
            print(f"Subject: {subject}")
            print(f"Body:\n{text_body}")
            print(f"--- END EMAIL ---\n")
            return True

        try:
            async with aiosmtplib.SMTP(hostname=settings.SMTP_HOST, port=settings.SMTP_PORT) as smtp:
                await smtp.login(settings.SMTP_USER, settings.SMTP_PASSWORD)
                await smtp.sendmail(settings.EMAIL_FROM, to_email, message.as_string())
            return True
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.warning("Email to %s failed: %s", to_email, e)
            return False

    @staticmethod
    async def send_contact_message(name: str, email: str, reason: str, body: str) -> bool:
        """Forward a contact form submission to the team"""

        reason_label = CONTACT_REASONS.get(reason, reason)

        text_body = f"""
New Contact Form Submission

Name: {name}
Email: {email}
Reason: {reason_label}

{body}
        """

        return await EmailService.send_email(
            settings.TEAM_EMAIL,
            f"New Contact Form Submission - {reason_label}",
            text_body,
            reply_to=email
        )

    @staticmethod
    async def notify_new_application(application: dict) -> bool:
        """Tell the team about a new job application"""

        html_body = f"""
        <html>
          <body style="font-family: Arial, sans-serif; color: #333;">
            <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
              <h2 style="color: #2c3e50;">New application received</h2>
              <p><strong>{application.get('name')}</strong> applied for
                 <strong>{application.get('role') or 'an open role'}</strong>.</p>
              <p>Email: <code>{application.get('email')}</code></p>
              <p>Portfolio: {application.get('portfolio_url') or '-'}</p>
              <p>Resume: {application.get('resume_url') or '-'}</p>
              <p>{application.get('message') or ''}</p>
              <p>
                <a href="{settings.APP_URL}/admin" style="background-color: #007bff; color: white; padding: 10px 20px; text-decoration: none; border-radius: 5px; display: inline-block;">
                  Open admin panel
                </a>
              </p>
            </div>
          </body>
        </html>
        """

        text_body = f"""
New application received

Name: {application.get('name')}
Email: {application.get('email')}
Role: {application.get('role') or '-'}
Portfolio: {application.get('portfolio_url') or '-'}
Resume: {application.get('resume_url') or '-'}

{application.get('message') or ''}

Review it at {settings.APP_URL}/admin
        """

        return await EmailService.send_email(
            settings.TEAM_EMAIL,
            f"New application - {application.get('name')}",
            text_body,
            html_body,
            reply_to=application.get("email")
        )


# Create singleton instance
email_service = EmailService()
