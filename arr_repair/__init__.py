"""
Arr Repair - Stuck Download Repair Tool

Reconciles downloads stuck in the Sonarr/Radarr queue with the server's
history, moves the mis-named files to where the server expects them,
triggers a rescan and clears the repaired entries from the queue.
"""

__version__ = "1.0.0"
__author__ = "Arr Repair Contributors"
