"""
Use Cases

Organized into domain folders:
- auth/: Signup, login and password reset flows
- users/: The authenticated user's own account
- bookings/: Booking management, scoped to the authenticated user
"""
