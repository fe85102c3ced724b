"""Core pipeline for Spotify Code Generator"""
