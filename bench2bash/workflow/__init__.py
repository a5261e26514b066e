"""Commandline builders for third party workflow engines.
"""
