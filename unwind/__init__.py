"""Prototipo de la aplicación Unwind Yoga: navegación, onboarding y calendario."""
