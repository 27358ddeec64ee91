"""
Fire-and-forget notification emails.

Routes schedule these through FastAPI BackgroundTasks so they run after the
response is produced. Delivery errors are logged and dropped; nothing is
retried.
"""

import logging
from html import escape

from adapters import mail_adapter

logger = logging.getLogger("nutritrack.notifications")

_FOOTER = (
    '<p style="color: #999; font-size: 12px; margin-top: 30px;">'
    "This is an automated email. Please do not reply directly to this message."
    "</p>"
)


def greeting_name(email: str) -> str:
    """Local part of the address, used as the greeting in emails"""
    return email.split("@")[0]


def welcome_email(user_name: str) -> tuple[str, str]:
    subject = "Welcome to NutriTrack!"
    html = f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
      <h1 style="color: #4CAF50;">Welcome to NutriTrack!</h1>
      <p>Hi {escape(user_name)},</p>
      <p>Thank you for signing up! We're excited to help you track your nutrition
      and achieve your health goals.</p>
      <h2 style="color: #333;">Getting Started:</h2>
      <ul>
        <li>Log your meals daily to track calories</li>
        <li>View monthly analytics and insights</li>
        <li>Create and save your favorite recipes</li>
        <li>Upload diet plans and doctor consultations</li>
        <li>Customize your daily calorie goals</li>
      </ul>
      {_FOOTER}
    </div>
    """
    return subject, html


def goal_reached_email(user_name: str, total_calories: int, goal: int) -> tuple[str, str]:
    subject = "Calorie Goal Reached! - NutriTrack"
    html = f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
      <h1 style="color: #4CAF50;">Goal Achieved!</h1>
      <p>Hi {escape(user_name)},</p>
      <p>Congratulations! You've reached your daily calorie goal of {goal} kcal.</p>
      <div style="background-color: #e8f5e9; padding: 20px; border-radius: 8px;
                  margin: 20px 0; border-left: 4px solid #4CAF50;">
        <p style="margin: 0; font-size: 18px; font-weight: bold; color: #2e7d32;">
          Total Logged: {total_calories} kcal
        </p>
      </div>
      <p>Keep up the consistent tracking to maintain your health goals.</p>
      {_FOOTER}
    </div>
    """
    return subject, html


class NotificationService:
    """Dispatches user-facing emails; never raises"""

    @staticmethod
    def _deliver(kind: str, to: str, subject: str, html: str) -> bool:
        try:
            return mail_adapter.send_mail(to, subject, html)
        except Exception as exc:
            logger.error(f"notification_failed kind={kind} to={to} error={exc}")
            return False

    @staticmethod
    def send_welcome(email: str) -> bool:
        subject, html = welcome_email(greeting_name(email))
        return NotificationService._deliver("welcome", email, subject, html)

    @staticmethod
    def send_goal_reached(email: str, total_calories: int, goal: int) -> bool:
        subject, html = goal_reached_email(greeting_name(email), total_calories, goal)
        return NotificationService._deliver("goal_reached", email, subject, html)
