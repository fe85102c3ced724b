"""Configuration for Spotify Code Generator"""
