import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

logger = logging.getLogger("assetdesk.email")


def _recipients(to):
    if isinstance(to, str):
        to = [to]
    return [addr for addr in (to or []) if addr]


class SMTPMailer:
    """
    Sends HTML mail over SMTP with STARTTLS.

    send() never raises: a missing account, a refused connection or a
    rejected message are logged and reported as False.
    """

    def __init__(self, server="smtp.gmail.com", port=587, username=None, password=None,
                 sender_name="Ticket System", timeout=30):
        self.server = server
        self.port = int(port)
        self.username = username
        self.password = password
        self.sender_name = sender_name
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            server=config.get("MAIL_SERVER", "smtp.gmail.com"),
            port=config.get("MAIL_PORT", 587),
            username=config.get("MAIL_USERNAME"),
            password=config.get("MAIL_PASSWORD"),
            sender_name=config.get("MAIL_SENDER_NAME", "Ticket System"),
        )

    def send(self, to, subject: str, html_body: str) -> bool:
        recipients = _recipients(to)
        if not recipients:
            return False
        if not self.username or not self.password:
            logger.warning("Mail credentials missing (MAIL_USERNAME / MAIL_PASSWORD); not sending %r", subject)
            return False

        msg = MIMEMultipart()
        msg["From"] = formataddr((self.sender_name, self.username))
        msg["To"] = ", ".join(recipients)
        msg["Subject"] = subject
        msg.attach(MIMEText(html_body, "html"))

        try:
            with smtplib.SMTP(self.server, self.port, timeout=self.timeout) as server:
                server.ehlo()
                server.starttls()
                server.ehlo()
                server.login(self.username, self.password)
                server.send_message(msg, to_addrs=recipients)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Email to %s failed: %s", msg["To"], e)
            return False

        logger.info("Email %r sent to %s", subject, msg["To"])
        return True
