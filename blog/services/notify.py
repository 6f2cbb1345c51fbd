"""
Login Notification Service

Emails the site owner about every admin login attempt. Sending happens on a
background worker; a failure is logged and never reaches the request.
"""

import logging
import smtplib
import threading
from concurrent.futures import ThreadPoolExecutor
from email.message import EmailMessage

logger = logging.getLogger(__name__)


def client_ip(request):
    """Best guess at the caller's address, honouring X-Forwarded-For."""
    forwarded = request.headers.get('X-Forwarded-For')
    if forwarded:
        return forwarded
    return request.remote_addr or 'unknown'


class LoginNotifier:
    """Queues login-attempt emails onto a single worker thread."""

    def __init__(self, config, executor=None):
        self.server = config.get('MAIL_SERVER')
        self.port = config.get('MAIL_PORT', 587)
        self.username = config.get('MAIL_USERNAME')
        self.password = config.get('MAIL_PASSWORD')
        self.use_tls = config.get('MAIL_USE_TLS', True)
        self.sender = config.get('MAIL_SENDER')
        self.recipient = config.get('NOTIFY_EMAIL')
        self._executor = executor
        self._executor_lock = threading.Lock()

    @property
    def enabled(self):
        return bool(self.server and self.recipient)

    @property
    def executor(self):
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='login-notify')
            return self._executor

    def build_message(self, ip, username, success):
        outcome = 'Successful' if success else 'Failed'
        msg = EmailMessage()
        msg['Subject'] = f'{outcome} admin login attempt'
        msg['From'] = self.sender
        msg['To'] = self.recipient
        msg.set_content(
            f'{outcome} login attempt on the blog admin panel.\n\n'
            f'Username: {username or "(empty)"}\n'
            f'IP address: {ip}\n'
        )
        return msg

    def send(self, msg):
        with smtplib.SMTP(self.server, self.port, timeout=10) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username:
                smtp.login(self.username, self.password or '')
            smtp.send_message(msg)

    def notify(self, ip, username, success):
        """Queue a notification. Returns the Future, or None when disabled."""
        if not self.enabled:
            logger.debug('Login notification skipped, mail not configured')
            return None
        msg = self.build_message(ip, username, success)
        future = self.executor.submit(self.send, msg)
        future.add_done_callback(_log_failure)
        return future

    def shutdown(self):
        if self._executor is not None:
            self._executor.shutdown(wait=False)


def _log_failure(future):
    exc = future.exception()
    if exc is not None:
        logger.warning('Login notification failed: %s', exc)
