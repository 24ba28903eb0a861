from flight_quality.grouping import (
    adjacent_pairs,
    aircraft_sequences,
    continuity_breaks,
    continuous_legs,
    departure_sort_key,
    flight_number_groups,
    order_by_aircraft,
)


class TestAircraftSequences:
    def test_registrations_ascend_and_legs_are_chronological(self, make_flight):
        late = make_flight("B2", aircraft="N2", departs_in_hours=5)
        early = make_flight("B1", aircraft="N2", departs_in_hours=1)
        other = make_flight("A1", aircraft="N1", departs_in_hours=3)

        sequences = aircraft_sequences([late, early, other])

        assert list(sequences) == ["N1", "N2"]
        assert sequences["N2"] == [early, late]

    def test_unknown_aircraft_are_excluded(self, make_flight):
        flights = [
            make_flight("A1", aircraft=None),
            make_flight("A2", aircraft=""),
            make_flight("A3", aircraft="N1"),
        ]
        assert list(aircraft_sequences(flights)) == ["N1"]

    def test_missing_departure_sorts_first(self, make_flight):
        timed = make_flight("A1", departs_in_hours=1)
        untimed = make_flight("A2", departure_datetime=None)

        assert aircraft_sequences([timed, untimed])["N123"] == [untimed, timed]
        assert departure_sort_key(untimed) < departure_sort_key(timed)

    def test_equal_departures_keep_input_order(self, make_flight):
        first = make_flight("A1")
        second = make_flight("A2")
        assert aircraft_sequences([first, second])["N123"] == [first, second]
        assert aircraft_sequences([second, first])["N123"] == [second, first]

    def test_order_by_aircraft_flattens_sequences(self, make_flight):
        a = make_flight("A1", aircraft="N2", departs_in_hours=2)
        b = make_flight("B1", aircraft="N1", departs_in_hours=4)
        c = make_flight("C1", aircraft="N1", departs_in_hours=1)
        assert order_by_aircraft([a, b, c]) == [c, b, a]


class TestFlightNumberGroups:
    def test_groups_follow_first_appearance(self, make_flight):
        flights = [
            make_flight("ZZ9", departs_in_hours=0),
            make_flight("AA1", departs_in_hours=1),
            make_flight("ZZ9", departs_in_hours=-3),
        ]
        groups = flight_number_groups(flights)

        assert list(groups) == ["ZZ9", "AA1"]
        assert groups["ZZ9"] == [flights[2], flights[0]]

    def test_missing_flight_numbers_are_excluded(self, make_flight):
        groups = flight_number_groups([make_flight(None), make_flight(""), make_flight("AA1")])
        assert list(groups) == ["AA1"]


class TestAdjacentPairs:
    def test_pairs_never_span_groups(self, make_flight):
        n1 = [make_flight("A1", aircraft="N1"), make_flight("A2", aircraft="N1", departs_in_hours=3)]
        n2 = [make_flight("B1", aircraft="N2")]

        pairs = list(adjacent_pairs(aircraft_sequences(n1 + n2)))

        assert pairs == [(n1[0], n1[1])]

    def test_predicate_filters_pairs(self, make_flight):
        flights = [
            make_flight("A1", departs_in_hours=0),
            make_flight("A2", departs_in_hours=3),
            make_flight("A3", departs_in_hours=6),
        ]
        pairs = list(adjacent_pairs(aircraft_sequences(flights), lambda prev, cur: cur.flight_number == "A3"))
        assert pairs == [(flights[1], flights[2])]


class TestContinuity:
    def test_break_and_continuation_partition_the_pairs(self, make_flight):
        first = make_flight("A1", departure_airport="JFK", arrival_airport="LAX")
        continues = make_flight("A2", departure_airport="LAX", arrival_airport="SFO", departs_in_hours=3)
        jumps = make_flight("A3", departure_airport="ORD", arrival_airport="JFK", departs_in_hours=6)
        flights = [first, continues, jumps]

        assert list(continuity_breaks(flights)) == [(continues, jumps)]
        assert list(continuous_legs(flights)) == [(first, continues)]

    def test_empty_and_missing_airports_are_the_same(self, make_flight):
        first = make_flight("A1", arrival_airport="")
        second = make_flight("A2", departure_airport=None, departs_in_hours=3)
        assert list(continuity_breaks([first, second])) == []

    def test_comparison_is_case_sensitive(self, make_flight):
        first = make_flight("A1", arrival_airport="LAX")
        second = make_flight("A2", departure_airport="lax", departs_in_hours=3)
        assert len(list(continuity_breaks([first, second]))) == 1
