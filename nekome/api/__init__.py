"""Data models for Twitter API responses and error handling."""