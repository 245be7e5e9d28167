from api.settings.orm.settings_model import SETTINGS_ID, StoreSettingsModel

__all__ = ["SETTINGS_ID", "StoreSettingsModel"]
