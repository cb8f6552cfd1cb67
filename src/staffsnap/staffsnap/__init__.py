"""StaffSnap package.

Selfie-based staff attendance: clock in/out through a webcam capture session,
records enriched with a greeting and a device position, and monthly reports
for admins. Organized by feature modules with a thin Flask controller layer.
"""
