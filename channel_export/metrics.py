"""
Metrics Calculations

Derived channel statistics.
"""


def calculate_average_views(total_views: int, video_count: int) -> int:
    """
    Calculate average views per video for a channel.

    Args:
        total_views: Lifetime channel view count
        video_count: Number of public videos

    Returns:
        Views per video rounded down, 0 for channels without videos
    """
    if video_count <= 0:
        return 0
    return total_views // video_count
