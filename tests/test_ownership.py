"""
Unit tests for the ownership validator.
"""

from decimal import Decimal

from django.test import TestCase

from apps.core.exceptions import (
    EmployeeNotFoundError,
    UnauthorizedCustomerError,
    UnauthorizedEmployeeError,
)
from apps.core.ownership import Decision, OwnershipValidator, ResourceKind
from apps.core.principal import Principal, Role
from apps.loans.models import Loan
from apps.lockers.models import Locker
from apps.offerings.models import Offering
from tests.helpers import create_customer, create_employee


class CustomerRuleTests(TestCase):

    def setUp(self):
        self.customer = create_customer('asha@example.com')
        self.principal = Principal.from_account(self.customer)

    def test_own_record(self):
        decision = OwnershipValidator.authorize(
            self.principal, ResourceKind.CUSTOMER, self.customer.pk
        )
        self.assertIs(decision, Decision.OK)

    def test_other_record(self):
        other = create_customer('ravi@example.com')
        decision = OwnershipValidator.authorize(
            self.principal, ResourceKind.CUSTOMER, other.pk
        )
        self.assertIs(decision, Decision.DENIED)

    def test_missing_record_is_denied(self):
        decision = OwnershipValidator.authorize(
            self.principal, ResourceKind.CUSTOMER, 9999
        )
        self.assertIs(decision, Decision.DENIED)

    def test_employee_may_act_on_any_id(self):
        employee = Principal.from_account(create_employee('staff@example.com'))
        for customer_id in (self.customer.pk, 9999):
            decision = OwnershipValidator.authorize(
                employee, ResourceKind.CUSTOMER, customer_id
            )
            self.assertIs(decision, Decision.OK)

    def test_offering_ignores_offering_existence(self):
        decision = OwnershipValidator.authorize(
            self.principal, ResourceKind.OFFERING, self.customer.pk
        )
        self.assertIs(decision, Decision.OK)

    def test_enforce_raises_customer_error(self):
        with self.assertRaises(UnauthorizedCustomerError):
            OwnershipValidator.enforce(self.principal, ResourceKind.CUSTOMER, 9999)


class EmployeeRuleTests(TestCase):

    def setUp(self):
        self.employee = create_employee('meera@example.com')
        self.principal = Principal.from_account(self.employee)

    def test_own_record(self):
        decision = OwnershipValidator.authorize(
            self.principal, ResourceKind.EMPLOYEE, self.employee.pk
        )
        self.assertIs(decision, Decision.OK)

    def test_missing_record(self):
        decision = OwnershipValidator.authorize(
            self.principal, ResourceKind.EMPLOYEE, 9999
        )
        self.assertIs(decision, Decision.NOT_FOUND)
        with self.assertRaises(EmployeeNotFoundError):
            OwnershipValidator.enforce(self.principal, ResourceKind.EMPLOYEE, 9999)

    def test_other_employee(self):
        other = create_employee('kiran@example.com', role=Role.MANAGER)
        decision = OwnershipValidator.authorize(
            self.principal, ResourceKind.EMPLOYEE, other.pk
        )
        self.assertIs(decision, Decision.DENIED)
        with self.assertRaises(UnauthorizedEmployeeError):
            OwnershipValidator.enforce(self.principal, ResourceKind.EMPLOYEE, other.pk)

    def test_customer_principal_denied(self):
        customer = Principal.from_account(create_customer('asha@example.com'))
        decision = OwnershipValidator.authorize(
            customer, ResourceKind.EMPLOYEE, self.employee.pk
        )
        self.assertIs(decision, Decision.DENIED)


class OfferingChildRuleTests(TestCase):

    def setUp(self):
        self.alice = create_customer('alice@example.com')
        self.bob = create_customer('bob@example.com')
        alice_offering = Offering.objects.create(customer=self.alice)
        Offering.objects.create(customer=self.bob)
        Loan.objects.create(
            number=900, customer_id=self.alice.pk,
            amount=Decimal('10.00'), offering=alice_offering,
        )
        Locker.objects.create(
            number=55, account_number=1, branch_code=1, offering=alice_offering,
        )
        self.alice_principal = Principal.from_account(self.alice)
        self.bob_principal = Principal.from_account(self.bob)

    def test_owner_reaches_children(self):
        self.assertIs(
            OwnershipValidator.authorize(
                self.alice_principal, ResourceKind.LOAN, self.alice.pk, 900
            ),
            Decision.OK,
        )
        self.assertIs(
            OwnershipValidator.authorize(
                self.alice_principal, ResourceKind.LOCKER, self.alice.pk, 55
            ),
            Decision.OK,
        )

    def test_foreign_child_through_own_path(self):
        decision = OwnershipValidator.authorize(
            self.bob_principal, ResourceKind.LOAN, self.bob.pk, 900
        )
        self.assertIs(decision, Decision.DENIED)

    def test_missing_child_is_denied_not_missing(self):
        decision = OwnershipValidator.authorize(
            self.alice_principal, ResourceKind.LOAN, self.alice.pk, 12345
        )
        self.assertIs(decision, Decision.DENIED)

    def test_customer_without_offering(self):
        carol = create_customer('carol@example.com')
        decision = OwnershipValidator.authorize(
            Principal.from_account(carol), ResourceKind.LOCKER, carol.pk, 55
        )
        self.assertIs(decision, Decision.DENIED)

    def test_number_required(self):
        with self.assertRaises(ValueError):
            OwnershipValidator.authorize(
                self.alice_principal, ResourceKind.LOAN, self.alice.pk
            )
