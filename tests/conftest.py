"""Shared report samples for the test suite"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


SAMPLE_CONFIG_REPORT = """Smart Array P420i in Slot 0 (sn: ABC123)
   array A (SAS, Unused Space: 0  B)
      logicaldrive 1 (279 GB, RAID 1, OK)
      physicaldrive 1I:1:1 (port 1I:box 1:bay 1, SAS, 300 GB, OK)
"""

FULL_CONFIG_REPORT = """
Smart Array P420i in Slot 0 (Embedded)    (sn: 0014380287D4A10)

   Internal Drive Cage at Port 1I, Box 1, OK

   Internal Drive Cage at Port 2I, Box 0, OK
   array A (SAS, Unused Space: 0  MB)

      logicaldrive 1 (279.4 GB, RAID 1, OK)

      physicaldrive 1I:1:1 (port 1I:box 1:bay 1, SAS, 300 GB, OK)
      physicaldrive 1I:1:2 (port 1I:box 1:bay 2, SAS, 300 GB, OK)

   array B (SATA, Unused Space: 1.5 TB)

      logicaldrive 2 (4.0 TB, RAID 1+0, Interim Recovery Mode)

      physicaldrive 1I:1:3 (port 1I:box 1:bay 3, SATA, 2 TB, OK)
      physicaldrive 1I:1:4 (port 1I:box 1:bay 4, SATA, 2 TB, Failed)

   unassigned

      physicaldrive 2I:1:5 (port 2I:box 1:bay 5, SAS, 600 GB, OK, spun down)

   SEP (Vendor ID PMCSIERA, Model SRCv8x6G) 380 (WWID: 5001438028C8A16F)

Smart Array P812 in Slot 3    (sn: PAFGK0ARH1Q0TY)

   array A (SAS, Unused Space: 0  MB)

      logicaldrive 1 (1.2 TB, RAID 5, OK)

      physicaldrive 5E:1:1 (port 5E:box 1:bay 1, SAS, 600 GB, OK)
"""

STATUS_REPORT = """
Smart Array P420i in Slot 0 (Embedded)
   Bus Interface: PCI
   Slot: 0
   Serial Number: 0014380287D4A10
   Cache Serial Number: PBKUC0BRH6V6OF
   RAID 6 (ADG) Status: Disabled
   Controller Status: OK
   Hardware Revision: B
   Firmware Version: 8.00
   Rebuild Priority: Medium
   Expand Priority: Medium
   Surface Scan Delay: 3 secs
   Surface Scan Mode: Idle
   Queue Depth: Automatic
   Monitor and Performance Delay: 60  min
   Elevator Sort: Enabled
   Degraded Performance Optimization: Disabled
   Inconsistency Repair Policy: Disabled
   Wait for Cache Room: Disabled
   Surface Analysis Inconsistency Notification: Disabled
   Post Prompt Timeout: 15 secs
   Cache Board Present: True
   Cache Status: OK
   Cache Ratio: 10% Read / 90% Write
   Drive Write Cache: Disabled
   Total Cache Size: 1024 MB
   Total Cache Memory Available: 816 MB
   No-Battery Write Cache: Disabled
   Cache Backup Power Source: Capacitors
   Battery/Capacitor Count: 1
   Battery/Capacitor Status: OK
   SATA NCQ Supported: True
   Spare Activation Mode: Activate on drive failure
   Controller Temperature (C): 48
   Cache Module Temperature (C): 37
   Capacitor Temperature  (C): 22
   Number of Ports: 2 Internal only
   Encryption Supported: False
   Driver Name: hpsa
   Driver Version: 3.4.4
   Driver Supports HP SSD Smart Path: True
"""


@pytest.fixture
def sample_config_report():
    """Single controller, single array, two drives"""
    return SAMPLE_CONFIG_REPORT


@pytest.fixture
def full_config_report():
    """Two controllers with several arrays, annotations and unassigned drives"""
    return FULL_CONFIG_REPORT


@pytest.fixture
def status_report():
    """Output of 'ctrl slot=0 show' for a healthy P420i"""
    return STATUS_REPORT
