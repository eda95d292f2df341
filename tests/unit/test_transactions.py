"""Unit tests for TransactionBuilder and transaction submission."""

import pytest

from sequence_sdk.core.exceptions import BuilderError, NetworkError
from sequence_sdk.core.types import IssueAction, RetireAction, Transaction, TransferAction
from sequence_sdk.transactions.builder import TransactionBuilder


@pytest.fixture
def builder():
    return TransactionBuilder()


class TestTransactionBuilder:
    """Test accumulating actions."""

    def test_empty(self, builder):
        assert builder.actions == ()
        assert builder.action_count == 0
        assert builder.reference_data is None
        assert not builder.frozen

    def test_actions_keep_order_and_type(self, builder):
        """Test each append adds one typed action in call order."""
        builder.issue(flavor_id="usd", amount=100, destination_account_id="alice")
        builder.transfer(flavor_id="usd", amount=30, source_account_id="alice", destination_account_id="bob")
        builder.retire(flavor_id="usd", amount=5, source_account_id="bob")

        actions = builder.actions
        assert [action.type for action in actions] == ["issue", "transfer", "retire"]
        assert isinstance(actions[0], IssueAction)
        assert isinstance(actions[1], TransferAction)
        assert isinstance(actions[2], RetireAction)
        assert actions[1].source_account_id == "alice"

    def test_duplicates_kept(self, builder):
        """Test identical actions are not deduplicated."""
        builder.issue(flavor_id="usd", amount=1, destination_account_id="alice")
        builder.issue(flavor_id="usd", amount=1, destination_account_id="alice")

        assert builder.action_count == 2

    def test_extra_fields_preserved(self, builder):
        """Test fields unknown to the SDK are passed through to the ledger."""
        builder.transfer(amount=1, flavor_id="usd", customField="kept")

        body = builder.freeze().to_body()
        assert body["actions"][0]["customField"] == "kept"

    def test_filter_transfer_wire_format(self, builder):
        """Test snake_case arguments are sent in camelCase."""
        builder.transfer(
            amount=10,
            filter="tags.invoice=$1",
            filter_params=["inv-1"],
            destination_account_id="bob",
            token_tags={"kind": "settled"},
            action_tags={"source": "api"},
        )

        assert builder.freeze().to_body() == {
            "actions": [{
                "type": "transfer",
                "amount": 10,
                "filter": "tags.invoice=$1",
                "filterParams": ["inv-1"],
                "destinationAccountId": "bob",
                "tokenTags": {"kind": "settled"},
                "actionTags": {"source": "api"},
            }]
        }

    def test_values_sent_unchanged(self, builder):
        """Test field values reach the wire exactly as given, without coercion."""
        builder.issue(flavor_id=123, amount="100", destination_account_id="alice")
        builder.transfer(flavor_id="usd", amount=1.5, source_account_id="alice", destination_account_id="bob")

        actions = builder.freeze().to_body()["actions"]
        assert actions[0]["amount"] == "100"
        assert actions[0]["flavorId"] == 123
        assert actions[1]["amount"] == 1.5
        assert isinstance(actions[1]["amount"], float)

    def test_missing_amount_passed_through(self, builder):
        """Test an action without an amount is appended and left for the ledger to judge."""
        builder.issue(flavor_id="usd", destination_account_id="alice")

        assert builder.action_count == 1
        assert builder.freeze().to_body()["actions"] == [
            {"type": "issue", "flavorId": "usd", "destinationAccountId": "alice"}
        ]

    def test_type_cannot_be_overridden(self, builder):
        builder.retire(type="issue", amount=1, flavor_id="usd")

        assert builder.actions[0].type == "retire"
        assert builder.freeze().to_body()["actions"][0]["type"] == "retire"

    def test_snake_case_extra_fields_camelized(self, builder):
        """Test unknown snake_case fields are sent in camelCase like known ones."""
        builder.issue(amount=1, asset_tags={"x": 1}, customField="kept")

        action = builder.freeze().to_body()["actions"][0]
        assert action["assetTags"] == {"x": 1}
        assert action["customField"] == "kept"
        assert "asset_tags" not in action

    def test_reference_data(self, builder):
        builder.reference_data = {"memo": "legacy"}
        builder.issue(flavor_id="usd", amount=1, destination_account_id="alice")

        body = builder.freeze().to_body()
        assert body["referenceData"] == {"memo": "legacy"}

    def test_frozen_builder_rejects_appends(self, builder):
        """Test a submitted builder cannot be reused."""
        builder.issue(flavor_id="usd", amount=1, destination_account_id="alice")
        builder.freeze()

        assert builder.frozen
        with pytest.raises(BuilderError):
            builder.issue(flavor_id="usd", amount=1, destination_account_id="alice")
        with pytest.raises(BuilderError):
            builder.reference_data = {"memo": "late"}
        assert builder.action_count == 1

    def test_actions_view_is_read_only(self, builder):
        builder.issue(flavor_id="usd", amount=1, destination_account_id="alice")

        with pytest.raises(AttributeError):
            builder.actions.append("anything")


class TestTransact:
    """Test submitting transactions."""

    @pytest.mark.asyncio
    async def test_two_issues_one_request(self, client, mock_request):
        """Test two issue actions are submitted together, in order."""
        mock_request.return_value = {"id": "tx1", "sequenceNumber": 7}

        def build(builder):
            builder.issue(flavor_id="usd", amount=10, destination_account_id="alice")
            builder.issue(flavor_id="eur", amount=20, destination_account_id="bob")

        transaction = await client.transactions.transact(build)

        mock_request.assert_awaited_once()
        path, body = mock_request.await_args.args
        assert path == '/transact'
        assert body == {
            "actions": [
                {"type": "issue", "amount": 10, "flavorId": "usd", "destinationAccountId": "alice"},
                {"type": "issue", "amount": 20, "flavorId": "eur", "destinationAccountId": "bob"},
            ]
        }
        assert isinstance(transaction, Transaction)
        assert transaction.id == "tx1"
        assert transaction.sequence_number == 7

    @pytest.mark.asyncio
    async def test_builder_error_skips_network(self, client, mock_request):
        """Test an exception in the builder function is raised unchanged with nothing sent."""
        error = ValueError("bad amount")

        def build(builder):
            builder.issue(flavor_id="usd", amount=10, destination_account_id="alice")
            raise error

        with pytest.raises(ValueError) as exc_info:
            await client.transactions.transact(build)

        assert exc_info.value is error
        mock_request.assert_not_called()

    @pytest.mark.asyncio
    async def test_builder_error_callback(self, client, mock_request):
        """Test the callback receives the builder function's exception once."""
        error = KeyError("missing")
        calls = []

        def build(builder):
            raise error

        with pytest.raises(KeyError):
            await client.transactions.transact(build, callback=lambda err, value: calls.append((err, value)))

        assert calls == [(error, None)]
        mock_request.assert_not_called()

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, client, mock_request):
        """Test transport errors from the submission are not wrapped."""
        error = NetworkError("connection reset")
        mock_request.side_effect = error

        with pytest.raises(NetworkError) as exc_info:
            await client.transactions.transact(lambda b: b.retire(flavor_id="usd", amount=1, source_account_id="alice"))

        assert exc_info.value is error
        mock_request.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_builder_not_reusable(self, client, mock_request):
        """Test the builder handed to transact is frozen after submission."""
        mock_request.return_value = {"id": "tx1"}
        captured = []

        def build(builder):
            captured.append(builder)
            builder.issue(flavor_id="usd", amount=1, destination_account_id="alice")

        await client.transactions.transact(build)

        with pytest.raises(BuilderError):
            captured[0].issue(flavor_id="usd", amount=1, destination_account_id="alice")

    @pytest.mark.asyncio
    async def test_fresh_builder_per_call(self, client, mock_request):
        """Test every transact call gets its own builder."""
        mock_request.return_value = {"id": "tx"}
        captured = []

        await client.transactions.transact(captured.append)
        await client.transactions.transact(captured.append)

        assert captured[0] is not captured[1]
        assert mock_request.await_args_list[0].args[1] == {"actions": []}

    @pytest.mark.asyncio
    async def test_transact_callback(self, client, mock_request):
        """Test the callback receives the committed transaction once."""
        mock_request.return_value = {"id": "tx9"}
        calls = []

        transaction = await client.transactions.transact(
            lambda b: b.issue(flavor_id="usd", amount=1, destination_account_id="alice"),
            callback=lambda err, value: calls.append((err, value))
        )

        assert calls == [(None, transaction)]
        assert transaction.id == "tx9"
