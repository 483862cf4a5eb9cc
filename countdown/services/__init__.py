# -*- coding: utf-8 -*-
"""
Support services for the countdown application.

Currently only holds the centralised logging setup used by the entry
point and the UI modules.
"""
