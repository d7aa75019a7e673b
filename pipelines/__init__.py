"""
Pipeline entry points for the qualifier agent.

The startup pipeline runs the whole workflow once:
1. Register - Send candidate details, receive webhook and token
2. Select - Pick the SQL answer from the registration number
3. Submit - Post the answer to the webhook
"""
