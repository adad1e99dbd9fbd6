from learnhub.application.content.events.content_published_handler import ContentPublishedHandler

__all__ = ["ContentPublishedHandler"]
