from .common import ensure_api_key, ensure_dev_platform, ensure_owner, is_owner

__all__ = ["ensure_api_key", "ensure_dev_platform", "ensure_owner", "is_owner"]
