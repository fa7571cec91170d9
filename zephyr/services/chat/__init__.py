from zephyr.services.chat.chat_service import ChatService

__all__ = ["ChatService"]
