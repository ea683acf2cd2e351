import sys

from tuzla_guide_api.app.core.security import create_access_token

# principal вызывающего; срок действия, например, 365 дней (секунды)
principal = sys.argv[1] if len(sys.argv) > 1 else "guide-admin"
token = create_access_token(principal, expires_delta=365*24*60*60)
print(token)
