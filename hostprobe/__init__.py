"""
hostprobe - cross-platform host inspection.

Reports operating system identity, CPU architecture, distribution/edition
metadata, CPU model and core count, GPU adapter and public IP information
for the machine it runs on.
"""

VERSION = "0.3.0"
