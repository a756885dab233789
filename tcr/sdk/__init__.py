"""SDK locators."""

from tcr.sdk.xcode import find_xcode_dir, find_xcode_sdkvers

__all__ = ["find_xcode_dir", "find_xcode_sdkvers"]
