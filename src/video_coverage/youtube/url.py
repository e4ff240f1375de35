import re
from typing import Optional

# Recognises watch?v=, youtu.be/, embed/, v/ and /u/<x>/ URL shapes.
# Group 7 holds the candidate id.
VIDEO_URL_REGEX = re.compile(r"^.*((youtu.be/)|(v/)|(/u/\w/)|(embed/)|(watch\?))\??v?=?([^#&?]*).*")

VIDEO_ID_LENGTH = 11

def extract_video_id(url: str) -> Optional[str]:
    """
    Extracts the 11-character video id from a YouTube URL.
    Returns None when the URL has no recognisable id.
    """
    if not url:
        return None
    match = VIDEO_URL_REGEX.match(url)
    if match and len(match.group(7)) == VIDEO_ID_LENGTH:
        return match.group(7)
    return None

def canonical_watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"
