"""Request signing."""

from dingtalk_robot.signing.signer import (
    compute_signature,
    generate_signed_url,
    url_encode,
)

__all__ = ["compute_signature", "generate_signed_url", "url_encode"]
