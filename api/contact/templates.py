"""
Email bodies for the contact form.

All submitter-provided text goes through `html.escape` before it is placed
into markup.
"""

from __future__ import annotations

from html import escape

from .schemas import ContactSubmission

BANNER_CID = "accelrixbanner"

AUTO_REPLY_SUBJECT = "📬 We've received your message – Accelrix"


def single_line(text: str) -> str:
    # Header values must not carry CR/LF.
    return " ".join(text.split())


def admin_subject(submission: ContactSubmission) -> str:
    return f"📬 {single_line(submission.subject)}"


def admin_text(submission: ContactSubmission) -> str:
    lines = [
        "New Contact Message",
        "",
        f"Name: {submission.name}",
        f"Email: {submission.email}",
    ]
    if submission.phone:
        lines.append(f"Phone: {submission.phone}")
    lines += ["", "Message:", submission.message]
    return "\n".join(lines)


def admin_html(submission: ContactSubmission) -> str:
    phone = (
        f"<p><strong>Phone:</strong> {escape(submission.phone)}</p>"
        if submission.phone
        else ""
    )
    message = escape(submission.message).replace("\n", "<br />")
    return f"""
        <h3>New Contact Message</h3>
        <p><strong>Name:</strong> {escape(submission.name)}</p>
        <p><strong>Email:</strong> {escape(submission.email)}</p>
        {phone}
        <p><strong>Message:</strong></p>
        <p>{message}</p>
    """


def auto_reply_text(submission: ContactSubmission, *, site_url: str) -> str:
    return (
        f"Hi {submission.name},\n\n"
        "Thank you for reaching out to Accelrix! We've received your message and our "
        "team will get back to you as soon as possible. You can typically expect a "
        "response within 24-48 hours.\n\n"
        f"In the meantime, feel free to explore more about what we offer: {site_url}\n\n"
        "- The Accelrix Team\n"
    )


def auto_reply_html(submission: ContactSubmission, *, site_url: str, with_banner: bool) -> str:
    banner = (
        f"""
        <tr>
          <td style="padding: 0; text-align: center; border-radius: 8px 8px 0 0; overflow: hidden;">
            <img src="cid:{BANNER_CID}" alt="Accelrix Banner" width="100%"
                 style="display: block; max-width: 600px; height: auto; border-radius: 8px 8px 0 0;" />
          </td>
        </tr>"""
        if with_banner
        else ""
    )
    href = escape(site_url, quote=True)
    return f"""
    <div style="font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; color: #333; background-color: #f9f9f9; padding: 10px 15px;">
      <table role="presentation" border="0" cellpadding="0" cellspacing="0" width="100%"
             style="max-width: 600px; margin: auto; background: #ffffff; border-radius: 8px; box-shadow: 0 2px 8px rgba(0,0,0,0.05);">
        {banner}
        <tr>
          <td style="padding: 25px 30px;">
            <h2 style="margin: 0 0 15px; color: #007FFF; font-size: 24px; line-height: 1.2;">Hi {escape(submission.name)},</h2>
            <p style="margin: 0 0 16px; font-size: 16px; line-height: 1.5;">
              Thank you for reaching out to <strong>Accelrix</strong>! 🎉<br />
              We've received your message and our team will get back to you as soon as possible.
              You can typically expect a response within 24–48 hours.
            </p>
            <p style="margin: 0 0 20px; font-size: 16px; line-height: 1.5;">
              In the meantime, feel free to explore more about what we offer on our website.
            </p>
            <a href="{href}" target="_blank"
               style="display: inline-block; background-color: #007FFF; color: #fff; text-decoration: none; padding: 12px 24px; border-radius: 6px; font-size: 16px;">
              Visit Accelrix Website
            </a>
            <hr style="margin: 30px 0; border: none; border-top: 1px solid #eee;" />
            <p style="font-size: 14px; color: #777; margin: 0;">
              This is an automated response confirming that we've received your message.
              Our support team will reach out shortly.
            </p>
            <p style="font-size: 14px; color: #999; margin-top: 40px; line-height: 1.4;">
              — The Accelrix Team
            </p>
          </td>
        </tr>
      </table>
    </div>
    """
