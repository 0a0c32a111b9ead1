from skillkit.integrations.feedback.abc import UserFeedback
from skillkit.integrations.feedback.real import InteractiveFeedback, SuppressedFeedback

__all__ = ["InteractiveFeedback", "SuppressedFeedback", "UserFeedback"]
