"""Screen views."""

from .example_view import ExampleView
from .home_view import HomeView
from .onboarding_view import OnboardingView, SplashView
from .settings_view import SettingsView

__all__ = ["ExampleView", "HomeView", "OnboardingView", "SplashView", "SettingsView"]
