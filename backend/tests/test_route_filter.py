"""Tests for route filtering."""
from ticketstats.services.route_filter import filter_by_route


class TestFilterByRoute:
    def test_matches_origin_and_destination(self, sample_tickets):
        matched = filter_by_route(sample_tickets, "VVO", "TLV")
        assert len(matched) == 4
        assert all(t.destination.upper() == "TLV" for t in matched)

    def test_case_insensitive_record_codes(self, ticket_factory):
        tickets = [ticket_factory(origin="vvo"), ticket_factory(origin="VVO")]
        assert filter_by_route(tickets, "VVO", "TLV") == tickets

    def test_case_insensitive_query(self, ticket_factory):
        tickets = [ticket_factory()]
        assert filter_by_route(tickets, "vvo", "tlv") == tickets

    def test_preserves_order(self, sample_tickets):
        matched = filter_by_route(sample_tickets, "VVO", "TLV")
        assert [t.price for t in matched] == [12400, 13100, 15300, 11000]

    def test_reverse_route_not_matched(self, ticket_factory):
        tickets = [ticket_factory(origin="TLV", destination="VVO")]
        assert filter_by_route(tickets, "VVO", "TLV") == []

    def test_no_match_returns_empty_list(self, sample_tickets):
        assert filter_by_route(sample_tickets, "AKL", "SYD") == []

    def test_empty_input(self):
        assert filter_by_route([], "VVO", "TLV") == []
