"""Implementation modules for ``mistral_client.base.cancellation``."""
