#!/usr/bin/env python3
"""
Quick check that the API keys the service needs are configured.
Values are masked; only presence is reported.
"""
from dotenv import load_dotenv
from video_coverage.config import Settings

load_dotenv()

def check_env():
    settings = Settings()
    required = {
        "GROQ_API_KEY": (settings.GROQ_API_KEY, "Groq API key (gsk_...), GORQ_API_KEY also accepted"),
        "YOUTUBE_API_KEY": (settings.YOUTUBE_API_KEY, "YouTube Data API v3 key"),
    }

    print("=" * 60)
    print("Configuration Check")
    print("=" * 60)

    all_good = True
    for var, (value, description) in required.items():
        if value:
            masked = value[:6] + "..." if len(value) > 6 else "***"
            print(f"✓ {var}: {masked}")
        else:
            print(f"✗ {var}: NOT SET ({description})")
            all_good = False

    print(f"  PORT: {settings.PORT}")
    print(f"  GROQ_MODEL: {settings.GROQ_MODEL}")
    print("=" * 60)

    if all_good:
        print("\n✓ All required keys are set!")
        print("\nStart the API with:")
        print("   video-coverage-api")
    else:
        print("\n✗ Some keys are missing. Add them to your .env file:")
        print("GROQ_API_KEY=gsk-your-key")
        print("YOUTUBE_API_KEY=your-youtube-key")

    print()

if __name__ == "__main__":
    check_env()
