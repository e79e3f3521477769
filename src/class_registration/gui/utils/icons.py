"""Material Design icons via QtAwesome."""
import qtawesome as qta
from class_registration.gui.styles.theme import Colors

class MaterialIcons:
    """Centralized Material Design icon definitions using QtAwesome."""

    @staticmethod
    def school():
        """Header badge icon."""
        return qta.icon('mdi6.school-outline', color=Colors.PRIMARY_BLUE)

    @staticmethod
    def account():
        """Student name input icon."""
        return qta.icon('mdi6.account-outline', color=Colors.TEXT_SECONDARY)

    @staticmethod
    def account_group():
        """Section heading for the student rounds."""
        return qta.icon('mdi6.account-group-outline', color=Colors.TEXT_SECONDARY)

    @staticmethod
    def send():
        """Submit action icon."""
        return qta.icon('mdi6.send', color=Colors.TEXT_ON_PRIMARY)

    @staticmethod
    def loading():
        """Submitting indicator."""
        return qta.icon('mdi6.loading', color=Colors.TEXT_ON_PRIMARY)

    @staticmethod
    def check_circle():
        """Success banner icon."""
        return qta.icon('mdi6.check-circle-outline', color=Colors.SUCCESS)

    @staticmethod
    def alert_circle():
        """Error banner icon."""
        return qta.icon('mdi6.alert-circle-outline', color=Colors.ERROR)

    @staticmethod
    def content_copy():
        """Copy icon."""
        return qta.icon('mdi6.content-copy', color=Colors.TEXT_SECONDARY)

    @staticmethod
    def delete():
        """Clear/delete icon."""
        return qta.icon('mdi6.delete-outline', color=Colors.ERROR)
