"""School CRUD. Plain ResourceService behaviour: all rows listed, hard delete."""

from catalog_api.models.school import School
from catalog_api.schemas.school import SchoolRead
from catalog_api.services.base import ResourceService


class SchoolService(ResourceService[School, SchoolRead]):
    model = School
    read_schema = SchoolRead
    resource_name = "school"


school_service = SchoolService()
