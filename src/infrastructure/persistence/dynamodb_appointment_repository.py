"""DynamoDB implementation of AppointmentRepository.

Single-table layout, one partition per insured person:

    PK = "INSURED#<insured_id>"    SK = "SCHEDULE#<schedule_id>"

Every entity field is stored as its own attribute (plus ``status`` and
``createdAt``). Rows are mapped back through the value objects, so data
read from the table is validated the same way as incoming requests.

Notes:
- boto3 is synchronous; methods are async to satisfy the protocol and are
  awaited one at a time inside a Lambda invocation.
- Number attributes come back from the Table resource as Decimal.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from src.core.errors import DomainError
from src.domain.entities.appointment import Appointment
from src.domain.errors import RepositoryError
from src.domain.protocols.date_validator_protocol import DateValidatorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects import (
    AppointmentDate,
    AppointmentStatus,
    CenterId,
    CountryISO,
    InsuredId,
    MedicId,
    ScheduleId,
    SpecialtyId,
)

if TYPE_CHECKING:
    from mypy_boto3_dynamodb.service_resource import Table


def partition_key(insured_id: InsuredId | str) -> str:
    return f"INSURED#{insured_id}"


def sort_key(schedule_id: ScheduleId | str) -> str:
    return f"SCHEDULE#{schedule_id}"


class DynamoDBAppointmentRepository:
    """DynamoDB appointment store.

    Implementation intentionally does NOT inherit from AppointmentRepository
    (PEP 544 structural subtyping).

    Args:
        table: boto3 DynamoDB Table resource.
        date_validator: Validator used to rebuild AppointmentDate values.
        logger: Structured logger.
    """

    def __init__(
        self,
        table: "Table",
        date_validator: DateValidatorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._table = table
        self._date_validator = date_validator
        self._logger = logger

    async def find_by_insured_id(self, insured_id: InsuredId) -> list[Appointment]:
        """Query every appointment in the insured person's partition.

        Args:
            insured_id: Validated insured identifier.

        Returns:
            Appointments in sort-key order (empty if none found).

        Raises:
            RepositoryError: If the query fails or a stored row is invalid.
        """
        pk = partition_key(insured_id)
        self._logger.debug("Querying appointments", table=self._table.name, pk=pk)

        items: list[dict[str, Any]] = []
        query_kwargs: dict[str, Any] = {"KeyConditionExpression": Key("PK").eq(pk)}
        try:
            while True:
                response = self._table.query(**query_kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                query_kwargs["ExclusiveStartKey"] = last_key
        except (ClientError, BotoCoreError) as e:
            self._logger.error(
                "Failed to retrieve appointment data from DynamoDB",
                error=e,
                insured_id=str(insured_id),
            )
            raise RepositoryError("Failed to retrieve appointment data", e) from e

        try:
            return [self._to_entity(item) for item in items]
        # Partial items (status-only upserts) or non-numeric ids fail outside the value objects
        except (DomainError, KeyError, ValueError, TypeError, ArithmeticError) as e:
            self._logger.error(
                "Stored appointment failed validation",
                error=e,
                insured_id=str(insured_id),
            )
            raise RepositoryError("Stored appointment data is invalid", e) from e

    async def save(self, appointment: Appointment) -> Appointment:
        """Put the appointment item, overwriting any previous version.

        Args:
            appointment: Appointment to store.

        Returns:
            The same appointment.

        Raises:
            RepositoryError: If the put fails.
        """
        item = self._to_item(appointment)
        self._logger.debug(
            "Saving appointment to DynamoDB",
            table=self._table.name,
            pk=item["PK"],
            sk=item["SK"],
            status=item["status"],
        )

        try:
            self._table.put_item(Item=item)
        except (ClientError, BotoCoreError) as e:
            self._logger.error(
                "Failed to save appointment data to DynamoDB",
                error=e,
                schedule_id=str(appointment.schedule_id),
                country=str(appointment.country),
            )
            raise RepositoryError("Failed to persist appointment data", e) from e

        self._logger.info(
            "Appointment persisted in DynamoDB",
            schedule_id=str(appointment.schedule_id),
            status=item["status"],
        )
        return appointment

    async def update_status(
        self,
        insured_id: InsuredId,
        schedule_id: ScheduleId,
        status: AppointmentStatus,
    ) -> None:
        """Set the ``status`` attribute of one appointment item.

        Args:
            insured_id: Insured identifier (partition).
            schedule_id: Schedule identifier (sort key).
            status: New status.

        Raises:
            RepositoryError: If the update fails.
        """
        key = {"PK": partition_key(insured_id), "SK": sort_key(schedule_id)}
        self._logger.debug(
            "Updating appointment status",
            table=self._table.name,
            pk=key["PK"],
            sk=key["SK"],
            new_status=str(status),
        )

        try:
            self._table.update_item(
                Key=key,
                UpdateExpression="SET #status = :newStatus",
                ExpressionAttributeNames={"#status": "status"},
                ExpressionAttributeValues={":newStatus": str(status)},
                ReturnValues="NONE",
            )
        except (ClientError, BotoCoreError) as e:
            self._logger.error(
                "Failed to update appointment status in DynamoDB",
                error=e,
                schedule_id=str(schedule_id),
                new_status=str(status),
            )
            raise RepositoryError("Failed to update appointment status", e) from e

        self._logger.info(
            "Appointment status updated in DynamoDB",
            schedule_id=str(schedule_id),
            new_status=str(status),
        )

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    def _to_item(self, appointment: Appointment) -> dict[str, Any]:
        return {
            "PK": partition_key(appointment.insured_id),
            "SK": sort_key(appointment.schedule_id),
            "insuredId": appointment.insured_id.value,
            "countryId": appointment.country.value,
            "scheduleId": appointment.schedule_id.value,
            "centerId": appointment.center_id.value,
            "specialtyId": appointment.specialty_id.value,
            "medicId": appointment.medic_id.value,
            "date": appointment.date.value,
            "status": str(appointment.status),
            "createdAt": datetime.now(UTC).isoformat(),
        }

    def _to_entity(self, item: dict[str, Any]) -> Appointment:
        appointment = Appointment(
            insured_id=InsuredId(item["insuredId"]),
            schedule_id=ScheduleId(int(item["scheduleId"])),
            country=CountryISO(item["countryId"]),
            center_id=CenterId(int(item["centerId"])),
            specialty_id=SpecialtyId(int(item["specialtyId"])),
            medic_id=MedicId(int(item["medicId"])),
            date=AppointmentDate(item["date"], self._date_validator),
        )
        if item.get("status"):
            appointment.assign_status(item["status"])
        return appointment
