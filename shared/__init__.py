"""Shared configuration and logging helpers for the resource service."""
