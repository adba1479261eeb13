#  SPDX-License-Identifier: Apache-2.0
"""Library to integrate with the Hyundai / Kia Bluelink API.

This library provides a Python interface to the european Bluelink and UVO
backends, with abilities to log in, list the vehicles of an account and read
their status.

NOTE: This work is not officially supported by Hyundai or Kia and functionality
can stop working at any time without warning.

"""
