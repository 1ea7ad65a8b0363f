# Vehicle Registration System database models
# Import all models here for SQLAlchemy discovery

from app.models.user import User                              # noqa
from app.models.vehicle import Vehicle                        # noqa
from app.models.owner import Owner                            # noqa
from app.models.registration import VehicleRegistration      # noqa
