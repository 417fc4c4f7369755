"""Email templates.

Plain string templates; every interpolated value is HTML-escaped.
"""

from html import escape

GALLERY_NAME = "The Friendship Center Gallery"

_LAYOUT = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>
  body {{ font-family: Helvetica, Arial, sans-serif; color: #1f2937; }}
  .email-body {{ max-width: 600px; margin: 0 auto; padding: 24px; }}
  .highlight-box {{ background: #f3f4f6; border-radius: 8px; padding: 16px; }}
  .cta-button {{ display: inline-block; background: #1f2937; color: #ffffff;
    padding: 12px 24px; border-radius: 6px; text-decoration: none; }}
  .footer {{ color: #6b7280; font-size: 12px; margin-top: 32px; }}
</style>
</head>
<body>
<div class="email-body">
{content}
<p class="footer">{gallery}</p>
</div>
</body>
</html>
"""


def _render(content: str) -> str:
    return _LAYOUT.format(content=content, gallery=GALLERY_NAME)


def artist_invitation(
    artist_name: str, admin_name: str, invitation_code: str, setup_url: str
) -> str:
    """Invitation to set up an artist account."""
    return _render(
        f"""<h1>You're Invited to Join Our Gallery!</h1>
<p>Hello {escape(artist_name)},</p>
<p>{escape(admin_name)} has invited you to become an artist at {GALLERY_NAME}!
We're excited to showcase your work and help you connect with art enthusiasts
in our community.</p>
<div class="highlight-box">
  <strong>Your Invitation Code:</strong> {escape(invitation_code)}
</div>
<h3>What's Next?</h3>
<ul>
  <li>Click the button below to set up your artist account</li>
  <li>Create your artist profile with bio and specialty</li>
  <li>Upload your first artwork to the gallery</li>
</ul>
<p><a href="{escape(setup_url, quote=True)}" class="cta-button">Set Up Your Artist Account</a></p>
<p>Welcome to our creative community!</p>
<p>The Friendship Center Gallery Team</p>"""
    )


def artist_welcome(artist_name: str, dashboard_url: str, support_email: str) -> str:
    """Welcome message after an invitation is redeemed."""
    return _render(
        f"""<h1>Welcome to {GALLERY_NAME}!</h1>
<p>Hello {escape(artist_name)},</p>
<p>Your artist account is ready. You can now manage your profile and upload
artworks from your dashboard.</p>
<p><a href="{escape(dashboard_url, quote=True)}" class="cta-button">Go to Your Dashboard</a></p>
<p>Questions? Write to us at {escape(support_email)}.</p>
<p>The Friendship Center Gallery Team</p>"""
    )


def artwork_approval(
    artist_name: str, artwork_title: str, approved_by: str, published_url: str
) -> str:
    """Notice that a submission was approved."""
    return _render(
        f"""<h1>Your Artwork Has Been Approved</h1>
<p>Hello {escape(artist_name)},</p>
<p>Great news! <strong>{escape(artwork_title)}</strong> was approved by
{escape(approved_by)} and is now part of the gallery.</p>
<p><a href="{escape(published_url, quote=True)}" class="cta-button">View Artwork</a></p>
<p>The Friendship Center Gallery Team</p>"""
    )


def artwork_rejection(
    artist_name: str, artwork_title: str, rejection_reason: str, admin_contact: str
) -> str:
    """Notice that a submission was not accepted."""
    return _render(
        f"""<h1>Artwork Submission Update</h1>
<p>Hello {escape(artist_name)},</p>
<p>Thank you for submitting <strong>{escape(artwork_title)}</strong>.
After review we are unable to publish it at this time.</p>
<div class="highlight-box">
  <strong>Reason:</strong> {escape(rejection_reason)}
</div>
<p>If you have questions, contact us at {escape(admin_contact)}.</p>
<p>The Friendship Center Gallery Team</p>"""
    )


def artwork_submission_notification(
    artist_name: str, artwork_title: str, submission_date: str, review_url: str
) -> str:
    """Admin notice of a submission waiting for review."""
    return _render(
        f"""<h1>New Artwork Submission</h1>
<p><strong>{escape(artist_name)}</strong> submitted
<strong>{escape(artwork_title)}</strong> on {escape(submission_date)}.</p>
<p><a href="{escape(review_url, quote=True)}" class="cta-button">Review Submission</a></p>"""
    )
