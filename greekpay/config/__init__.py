"""
Configuration Module

This module contains environment settings and logging configuration.
"""
