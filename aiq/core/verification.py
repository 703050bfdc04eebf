"""Certificate verification against the stored result.

Verification answers "does this code match the one stored result", not
"was this code ever issued". With a single-slot store, only the most recent
certificate can verify.
"""

import logging

from aiq.core.certificates import is_valid_certificate_format
from aiq.core.logging import get_logger, log_with_context
from aiq.core.scoring.types import VerificationResult, VerificationStatus
from aiq.db.result_store import ResultStore

logger = get_logger(__name__)


def verify_certificate(code: str, store: ResultStore) -> VerificationResult:
    """
    Check a certificate code against the stored result.

    Args:
        code: Certificate code as submitted (already normalized by the caller)
        store: Result store to read from

    Returns:
        VerificationResult; score, level and date are set only when valid
    """
    stored = store.get()

    if stored is not None and stored.certificate_code == code:
        log_with_context(logger, logging.INFO, "Certificate verified", certificate_code=code)
        return VerificationResult(
            valid=True,
            score=stored.score,
            level=stored.level,
            date=stored.timestamp.date().isoformat(),
            status=VerificationStatus.VERIFIED,
        )

    if is_valid_certificate_format(code):
        status = VerificationStatus.NOT_FOUND
    else:
        status = VerificationStatus.INVALID_FORMAT

    log_with_context(
        logger, logging.INFO, "Certificate rejected", certificate_code=code, status=status.value
    )
    return VerificationResult(valid=False, status=status)
