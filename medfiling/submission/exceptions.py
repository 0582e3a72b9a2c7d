class SubmissionError(Exception):
    """Raised when a finalized record could not be delivered."""
