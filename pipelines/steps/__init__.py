# Namespace for pipeline steps
from .acquire_text import AcquireText  # noqa: F401
from .extract_profile import ExtractProfile  # noqa: F401
from .persist_profile import PersistProfile  # noqa: F401
