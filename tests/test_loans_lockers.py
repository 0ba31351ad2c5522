"""
Tests for loans and lockers inside an offering.
"""

from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from apps.loans.models import Loan
from apps.lockers.models import Locker
from apps.offerings.models import Offering
from tests.helpers import (
    basic_auth,
    client_for,
    create_customer,
    customer_profile,
    offering_payload,
)


class LockerFlowTests(TestCase):
    """A customer registers, completes a profile and manages locker 55."""

    def test_full_locker_lifecycle(self):
        client = APIClient()

        response = client.post('/api/v1/customers/register', {
            'email': 'asha@example.com',
            'password': 'S3cret-pass',
        }, format='json')
        self.assertEqual(response.status_code, 201)
        customer_id = response.json()['data']

        client.credentials(
            HTTP_AUTHORIZATION=basic_auth('asha@example.com', 'S3cret-pass')
        )

        response = client.post(
            '/api/v1/customers',
            customer_profile(customer_id, account_number=1001),
            format='json',
        )
        self.assertEqual(response.status_code, 201)

        locker = {'number': 55, 'account_number': 1001, 'branch_code': 10}
        offerings_url = f'/api/v1/customers/{customer_id}/offerings'
        response = client.post(
            offerings_url, offering_payload(lockers=[locker]), format='json'
        )
        self.assertEqual(response.status_code, 201)

        locker_url = f'{offerings_url}/lockers/55'
        response = client.get(locker_url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data'], locker)

        # another customer asking for the same locker gets a denial, not data
        intruder = create_customer('ravi@example.com')
        response = client_for(intruder).get(locker_url)
        self.assertEqual(response.status_code, 403)
        self.assertIsNone(response.json()['data'])

        response = client.post(
            f'{offerings_url}/lockers',
            {'number': 56, 'account_number': 1001, 'branch_code': 10},
            format='json',
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['data'], 56)

        response = client.put(
            locker_url,
            {'number': 55, 'account_number': 1001, 'branch_code': 9},
            format='json',
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(Locker.objects.get(number=55).branch_code, 9)

        response = client.get(f'{offerings_url}/lockers')
        self.assertEqual([item['number'] for item in response.json()['data']], [55, 56])

        response = client.delete(locker_url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['message'], 'Locker details successfully removed')

        # a number that no longer exists is reported as unauthorized
        response = client.get(locker_url)
        self.assertEqual(response.status_code, 403)


class LoanTests(TestCase):
    """Test /api/v1/customers/<id>/offerings/loans."""

    def setUp(self):
        self.alice = create_customer('alice@example.com', name='Alice')
        self.bob = create_customer('bob@example.com', name='Bob')
        self.alice_offering = Offering.objects.create(customer=self.alice)
        self.bob_offering = Offering.objects.create(customer=self.bob)
        Loan.objects.create(
            number=900, customer_id=self.alice.pk,
            amount=Decimal('2500.00'), offering=self.alice_offering,
        )
        self.alice_client = client_for(self.alice)
        self.bob_client = client_for(self.bob)
        self.alice_loans = f'/api/v1/customers/{self.alice.pk}/offerings/loans'
        self.bob_loans = f'/api/v1/customers/{self.bob.pk}/offerings/loans'

    def test_add_loan(self):
        response = self.alice_client.post(
            self.alice_loans, {'number': 901, 'amount': '1000.50'}, format='json'
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['data'], 901)
        loan = Loan.objects.get(number=901)
        self.assertEqual(loan.offering_id, self.alice_offering.pk)
        self.assertEqual(loan.customer_id, self.alice.pk)

    def test_add_loan_bumps_offering(self):
        before = self.alice_offering.updated_at
        self.alice_client.post(
            self.alice_loans, {'number': 901, 'amount': '1000.50'}, format='json'
        )
        self.alice_offering.refresh_from_db()
        self.assertGreaterEqual(self.alice_offering.updated_at, before)

    def test_add_loan_number_in_use_elsewhere(self):
        response = self.bob_client.post(
            self.bob_loans, {'number': 900, 'amount': '10.00'}, format='json'
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(Loan.objects.get(number=900).offering_id, self.alice_offering.pk)

    def test_add_loan_without_offering(self):
        carol = create_customer('carol@example.com')
        response = client_for(carol).post(
            f'/api/v1/customers/{carol.pk}/offerings/loans',
            {'number': 950, 'amount': '10.00'},
            format='json',
        )
        self.assertEqual(response.status_code, 403)
        self.assertFalse(Loan.objects.filter(number=950).exists())

    def test_add_loan_for_other_customer_id(self):
        response = self.alice_client.post(
            self.alice_loans,
            {'number': 901, 'amount': '10.00', 'customer_id': self.bob.pk},
            format='json',
        )
        self.assertEqual(response.status_code, 400)

    def test_non_positive_amount_rejected(self):
        response = self.alice_client.post(
            self.alice_loans, {'number': 901, 'amount': '0.00'}, format='json'
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn('amount', response.json()['data'])

    def test_list_loans(self):
        response = self.alice_client.get(self.alice_loans)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()['data'],
            [{'number': 900, 'customer_id': self.alice.pk, 'amount': '2500.00'}],
        )

    def test_list_other_customers_loans_denied(self):
        response = self.bob_client.get(self.alice_loans)
        self.assertEqual(response.status_code, 403)

    def test_cross_tenant_loan_through_own_path_denied(self):
        """Bob cannot reach Alice's loan through his own customer path."""
        response = self.bob_client.get(f'{self.bob_loans}/900')
        self.assertEqual(response.status_code, 403)
        self.assertEqual(
            response.json()['message'],
            'Customer is not authorized to perform this action on the resource',
        )

    def test_cross_tenant_delete_denied(self):
        response = self.bob_client.delete(f'{self.bob_loans}/900')
        self.assertEqual(response.status_code, 403)
        self.assertTrue(Loan.objects.filter(number=900).exists())

    def test_get_own_loan(self):
        response = self.alice_client.get(f'{self.alice_loans}/900')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['amount'], '2500.00')

    def test_update_amount_only(self):
        response = self.alice_client.put(
            f'{self.alice_loans}/900',
            {'number': 900, 'amount': '3000.00'},
            format='json',
        )
        self.assertEqual(response.status_code, 200)
        loan = Loan.objects.get(number=900)
        self.assertEqual(loan.amount, Decimal('3000.00'))
        self.assertEqual(loan.customer_id, self.alice.pk)

    def test_update_number_mismatch(self):
        response = self.alice_client.put(
            f'{self.alice_loans}/900',
            {'number': 901, 'amount': '3000.00'},
            format='json',
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(Loan.objects.get(number=900).amount, Decimal('2500.00'))

    def test_number_mismatch_on_foreign_path_is_inconsistent(self):
        """Bob's mismatched body on Alice's loan fails as inconsistent, not denied."""
        response = self.bob_client.put(
            f'{self.alice_loans}/900',
            {'number': 901, 'amount': '1.00'},
            format='json',
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()['message'],
            'Inconsistent details found in the request',
        )
        self.assertEqual(Loan.objects.get(number=900).amount, Decimal('2500.00'))

    def test_oversized_number_rejected(self):
        response = self.alice_client.post(
            self.alice_loans, {'number': 2**70, 'amount': '10.00'}, format='json'
        )
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body['message'], 'Request arguments are not valid')
        self.assertIn('number', body['data'])
        self.assertEqual(Loan.objects.count(), 1)

    def test_largest_storable_number_accepted(self):
        response = self.alice_client.post(
            self.alice_loans, {'number': 2**63 - 1, 'amount': '10.00'}, format='json'
        )
        self.assertEqual(response.status_code, 201)
        self.assertTrue(Loan.objects.filter(number=2**63 - 1).exists())

    def test_delete_own_loan(self):
        response = self.alice_client.delete(f'{self.alice_loans}/900')
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Loan.objects.filter(number=900).exists())
        self.assertTrue(Offering.objects.filter(pk=self.alice_offering.pk).exists())


class LockerTests(TestCase):
    """Test /api/v1/customers/<id>/offerings/lockers."""

    def setUp(self):
        self.alice = create_customer('alice@example.com', name='Alice')
        self.bob = create_customer('bob@example.com', name='Bob')
        self.alice_offering = Offering.objects.create(customer=self.alice)
        Offering.objects.create(customer=self.bob)
        Locker.objects.create(
            number=55, account_number=50100234, branch_code=7,
            offering=self.alice_offering,
        )
        self.url = f'/api/v1/customers/{self.bob.pk}/offerings/lockers'
        self.bob_client = client_for(self.bob)

    def test_number_in_use_elsewhere(self):
        response = self.bob_client.post(
            self.url,
            {'number': 55, 'account_number': 1, 'branch_code': 1},
            format='json',
        )
        self.assertEqual(response.status_code, 400)

    def test_cross_tenant_update_denied(self):
        response = self.bob_client.put(
            f'{self.url}/55',
            {'number': 55, 'account_number': 1, 'branch_code': 1},
            format='json',
        )
        self.assertEqual(response.status_code, 403)
        self.assertEqual(Locker.objects.get(number=55).branch_code, 7)

    def test_update_number_mismatch(self):
        response = client_for(self.alice).put(
            f'/api/v1/customers/{self.alice.pk}/offerings/lockers/55',
            {'number': 56, 'account_number': 1, 'branch_code': 1},
            format='json',
        )
        self.assertEqual(response.status_code, 400)

    def test_number_mismatch_on_foreign_path_is_inconsistent(self):
        """The path/body number check runs before the ownership check."""
        response = self.bob_client.put(
            f'/api/v1/customers/{self.alice.pk}/offerings/lockers/55',
            {'number': 56, 'account_number': 1, 'branch_code': 1},
            format='json',
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()['message'],
            'Inconsistent details found in the request',
        )
        self.assertEqual(Locker.objects.get(number=55).branch_code, 7)

    def test_oversized_account_number_rejected(self):
        response = self.bob_client.post(
            self.url,
            {'number': 60, 'account_number': 2**63, 'branch_code': 1},
            format='json',
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn('account_number', response.json()['data'])
        self.assertFalse(Locker.objects.filter(number=60).exists())
