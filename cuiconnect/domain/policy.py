from cuiconnect.domain.entities import Society, User
from cuiconnect.rules.models import Rules


class PolicyEngine:
    def __init__(self, rules: Rules):
        self.rules = rules

    def check_permission(self, user: User | None, action: str) -> bool:
        """
        Check if the user's role grants the action.

        Inactive users are denied everything. Role grants support a bare "*"
        and scoped wildcards ("society:*" matches "society:approve").
        """
        if not user or not user.active:
            return False

        allowed_actions = self.rules.rbac.roles.get(user.role, [])
        if "*" in allowed_actions or action in allowed_actions:
            return True

        if ":" in action:
            scope = action.split(":")[0]
            if f"{scope}:*" in allowed_actions:
                return True

        return False

    # --- Convenience predicates ---

    def can_manage_society(self, user: User | None, society: Society) -> bool:
        """Owning admin only; system admins may view but not decide requests."""
        if user is None or not self.check_permission(user, "society:manage"):
            return False
        return society.admin_id == user.user_id

    def can_create_society(self, user: User | None) -> bool:
        return self.check_permission(user, "society:create")

    def can_create_event(self, user: User | None) -> bool:
        return self.check_permission(user, "event:create")

    def can_post_announcement(self, user: User | None, society: Society) -> bool:
        return (
            self.check_permission(user, "announcement:post")
            and self.can_manage_society(user, society)
        )

    def can_broadcast_department(self, user: User | None) -> bool:
        return self.check_permission(user, "department:broadcast")

    def can_manage_users(self, user: User | None) -> bool:
        return self.check_permission(user, "users:manage")
