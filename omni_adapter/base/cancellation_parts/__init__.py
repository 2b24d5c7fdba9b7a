"""Implementation modules behind ``omni_adapter.base.cancellation``."""
