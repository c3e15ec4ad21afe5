"""
Page Object Models for the kanban application.
"""
from .base_page import BasePage
from .board_page import BoardPage
from .card_detail_page import CardDetailPage
from .home_page import HomePage
from .login_page import LoginPage

__all__ = [
    "BasePage",
    "BoardPage",
    "CardDetailPage",
    "HomePage",
    "LoginPage",
]
