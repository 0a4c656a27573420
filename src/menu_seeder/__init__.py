"""Menu Seeder - resets an Appwrite project and fills it with demo menu data."""

__version__ = "0.1.0"
