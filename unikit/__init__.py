"""In-memory framebuffer, locks, mailboxes and network and block device interfaces."""

__version__ = "0.1.0"

__all__ = [
    "blkdev",
    "blkdev_core",
    "blkreq",
    "color",
    "framebuffer",
    "locks",
    "mbox",
    "netdev",
]