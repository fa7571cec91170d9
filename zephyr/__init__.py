"""
Zephyr AI backend.

Chat, CAPTCHA and geo proxies plus the profile wizard store behind the
Zephyr browser UI.
"""
