"""Readers for Xcode project declarations and Package.resolved pins."""
