"""
Message composer - Verification email content.

Builds the verification link and renders the static email template. The
display name is the only user-supplied text interpolated into HTML; the link
is built from configuration and a percent-encoded token.
"""

from string import Template
from urllib.parse import quote

VERIFY_EMAIL_PATH = "/verify-email"

SUBJECT = "📧 Verify Your Email - Digital Skills Mastery Course"

# Characters encodeURIComponent leaves unescaped in addition to quote()'s defaults.
_TOKEN_SAFE_CHARS = "!*'()"

_HTML_TEMPLATE = Template(
    """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Verify Your Email</title>
</head>
<body style="margin: 0; padding: 0; font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background-color: #f4f7fa;">
  <table role="presentation" width="100%" cellspacing="0" cellpadding="0" style="max-width: 600px; margin: 0 auto; padding: 40px 20px;">
    <tr>
      <td>
        <table role="presentation" width="100%" cellspacing="0" cellpadding="0" style="background-color: #ffffff; border-radius: 12px; overflow: hidden;">
          <tr>
            <td style="background: linear-gradient(135deg, #3b82f6 0%, #22c55e 100%); padding: 40px 30px; text-align: center;">
              <h1 style="margin: 0; color: #ffffff; font-size: 28px; font-weight: 700;">📧 Verify Your Email</h1>
            </td>
          </tr>
          <tr>
            <td style="padding: 40px 30px;">
              <p style="margin: 0 0 20px; font-size: 18px; color: #1f2937;">
                Dear <strong>$name</strong>,
              </p>
              <p style="margin: 0 0 20px; font-size: 16px; color: #4b5563; line-height: 1.6;">
                Thank you for registering for the <strong>Digital Skills Mastery Course</strong>! Please verify your email address to complete your registration.
              </p>
              <div style="text-align: center; margin: 30px 0;">
                <a href="$verification_link" style="display: inline-block; background: linear-gradient(135deg, #3b82f6 0%, #22c55e 100%); color: #ffffff; text-decoration: none; padding: 16px 40px; border-radius: 8px; font-size: 18px; font-weight: 600;">
                  Verify Email Address
                </a>
              </div>
              <p style="margin: 20px 0; font-size: 14px; color: #6b7280; text-align: center;">
                Or copy and paste this link into your browser:
              </p>
              <p style="margin: 0 0 30px; font-size: 12px; color: #3b82f6; word-break: break-all; text-align: center;">
                $verification_link
              </p>
              <div style="background-color: #f0f9ff; border-left: 4px solid #3b82f6; padding: 20px; margin: 25px 0; border-radius: 0 8px 8px 0;">
                <h2 style="margin: 0 0 15px; font-size: 18px; color: #1e40af;">📅 Training Dates</h2>
                <p style="margin: 0; font-size: 20px; font-weight: 600; color: #1f2937;">December 1 - December 26, 2025</p>
              </div>
              <h3 style="margin: 25px 0 15px; font-size: 18px; color: #1f2937;">📚 Your Course Bundle Includes:</h3>
              <table role="presentation" width="100%" cellspacing="0" cellpadding="0">
                <tr>
                  <td style="padding: 12px 0; border-bottom: 1px solid #e5e7eb;">
                    <span style="font-size: 20px;">🌐</span>
                    <span style="margin-left: 12px; font-size: 15px; color: #374151;">Introduction to WordPress Website Development</span>
                  </td>
                </tr>
                <tr>
                  <td style="padding: 12px 0; border-bottom: 1px solid #e5e7eb;">
                    <span style="font-size: 20px;">📱</span>
                    <span style="margin-left: 12px; font-size: 15px; color: #374151;">Introduction to Digital Marketing</span>
                  </td>
                </tr>
                <tr>
                  <td style="padding: 12px 0;">
                    <span style="font-size: 20px;">🤖</span>
                    <span style="margin-left: 12px; font-size: 15px; color: #374151;">Introduction to AI Automation for Businesses</span>
                  </td>
                </tr>
              </table>
              <div style="background-color: #fef3c7; border: 1px solid #f59e0b; padding: 15px; margin: 25px 0; border-radius: 8px;">
                <p style="margin: 0; font-size: 14px; color: #92400e;">
                  ⚠️ This verification link will expire in 24 hours. If you did not register for this course, please ignore this email.
                </p>
              </div>
            </td>
          </tr>
          <tr>
            <td style="background-color: #f9fafb; padding: 30px; text-align: center; border-top: 1px solid #e5e7eb;">
              <p style="margin: 0 0 10px; font-size: 16px; font-weight: 600; color: #1f2937;">Dependify LLC</p>
              <p style="margin: 0; font-size: 14px; color: #6b7280;">In partnership with USLACC</p>
              <p style="margin: 15px 0 0; font-size: 12px; color: #9ca3af;">
                © 2025 Dependify LLC. All rights reserved.
              </p>
            </td>
          </tr>
        </table>
      </td>
    </tr>
  </table>
</body>
</html>
"""
)

_TEXT_TEMPLATE = Template(
    """Dear $name,

Thank you for registering for the Digital Skills Mastery Course! Please verify your email address to complete your registration:

$verification_link

Training dates: December 1 - December 26, 2025

This verification link will expire in 24 hours. If you did not register for this course, please ignore this email.

Dependify LLC, in partnership with USLACC
"""
)


def build_verification_link(app_url: str, verification_token: str) -> str:
    """
    Build the link the recipient follows to confirm their email.

    Args:
        app_url: Application base URL (a trailing slash is tolerated)
        verification_token: Opaque token, percent-encoded into the query string
    """
    encoded_token = quote(verification_token, safe=_TOKEN_SAFE_CHARS)
    return f"{app_url.rstrip('/')}{VERIFY_EMAIL_PATH}?token={encoded_token}"


def escape_name(name: str) -> str:
    """Neutralize markup in a user-supplied display name."""
    return name.replace("<", "&lt;").replace(">", "&gt;")


def compose(name: str, verification_link: str) -> str:
    """
    Render the HTML body of the verification email.

    The link appears twice: as the button target and as a copyable
    plain-text fallback.
    """
    return _HTML_TEMPLATE.substitute(
        name=escape_name(name),
        verification_link=verification_link,
    )


def compose_text(name: str, verification_link: str) -> str:
    """Render the plain-text alternative of the verification email."""
    return _TEXT_TEMPLATE.substitute(name=name, verification_link=verification_link)
