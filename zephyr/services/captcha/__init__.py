from zephyr.services.captcha.turnstile_service import TurnstileService

__all__ = ["TurnstileService"]
