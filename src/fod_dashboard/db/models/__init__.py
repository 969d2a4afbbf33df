from fod_dashboard.db.models.core.league import League
from fod_dashboard.db.models.core.league_setting import LeagueSetting
from fod_dashboard.db.models.core.player import Player
from fod_dashboard.db.models.core.team import Team
from fod_dashboard.db.models.settings.site_option import SiteOption

__all__ = [
    "League",
    "LeagueSetting",
    "Player",
    "SiteOption",
    "Team",
]
