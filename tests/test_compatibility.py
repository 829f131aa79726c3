"""
Hard Compatibility Filter Tests

Every predicate must pass for an offering to be scored at all; absent context
selections never restrict. Also covers blocking_criteria for the empty state.

Run:
----
    pytest tests/test_compatibility.py -v
"""

from advisor.models import ActiveContext, BehavioralSignals, ensure_offerings
from advisor.stages import blocking_criteria, filter_compatible, is_compatible, recommend_for_context
from advisor.stages.compatibility import failed_criterion


class TestPredicates:
    """One predicate at a time."""

    def test_category_mismatch_excludes_regardless_of_other_fields(self, make_offering):
        offering = make_offering(categoria="fibra", ativo=True, tipoPessoa="ambos", scoreBase=100)
        ctx = ActiveContext(categorias={"movel"})
        assert not is_compatible(offering, ctx)
        assert failed_criterion(offering, ctx) == "categoria"

    def test_lines_above_plan_capacity_excluded(self, make_offering):
        offering = make_offering(linhasInclusas=3, permiteCalculadoraLinhas=False)
        ctx = ActiveContext(linhas=5)
        assert failed_criterion(offering, ctx) == "linhas"

    def test_line_calculator_plans_serve_any_count(self, make_offering):
        offering = make_offering(linhasInclusas=3, permiteCalculadoraLinhas=True)
        assert is_compatible(offering, ActiveContext(linhas=50))

    def test_missing_lines_count_as_one(self, make_offering):
        offering = make_offering(linhasInclusas=None)
        assert is_compatible(offering, ActiveContext(linhas=1))
        assert not is_compatible(offering, ActiveContext(linhas=2))

    def test_carrier_must_be_selected(self, make_offering):
        offering = make_offering(operadora="tim")
        assert failed_criterion(offering, ActiveContext(operadoras={"vivo", "claro"})) == "operadora"
        assert is_compatible(offering, ActiveContext(operadoras={"vivo", "tim"}))

    def test_person_type(self, make_offering):
        ctx = ActiveContext(tipoPessoa="PF")
        assert failed_criterion(make_offering(tipoPessoa="PJ"), ctx) == "tipoPessoa"
        assert is_compatible(make_offering(tipoPessoa="PF"), ctx)
        assert is_compatible(make_offering(tipoPessoa="ambos"), ctx)

    def test_fiber_requires_fiber_category(self, make_offering):
        ctx = ActiveContext(fibra=True)
        assert failed_criterion(make_offering(categoria="movel"), ctx) == "fibra"
        for category in ("fibra", "combo", "internet-dedicada"):
            assert is_compatible(make_offering(categoria=category), ctx)

    def test_combo_requires_combo_category(self, make_offering):
        ctx = ActiveContext(combo=True)
        assert failed_criterion(make_offering(categoria="fibra"), ctx) == "combo"
        assert is_compatible(make_offering(categoria="combo"), ctx)

    def test_modality(self, make_offering):
        ctx = ActiveContext(modalidade="novo")
        assert failed_criterion(make_offering(modalidade="portabilidade"), ctx) == "modalidade"
        assert is_compatible(make_offering(modalidade="ambos"), ctx)
        assert is_compatible(make_offering(modalidade="novo"), ctx)

    def test_modality_ambos_in_context_does_not_restrict(self, make_offering):
        ctx = ActiveContext(modalidade="ambos")
        assert is_compatible(make_offering(modalidade="portabilidade"), ctx)

    def test_inactive_excluded(self, make_offering, empty_context):
        assert failed_criterion(make_offering(ativo=False), empty_context) == "ativo"


class TestFilterCompatible:
    """filter_compatible over a catalog."""

    def test_empty_context_keeps_active_offerings_for_default_person_type(self, catalog, empty_context):
        # Default person type is PF, so the PJ-only plan goes along with the inactive one
        ids = [o.id for o in filter_compatible(catalog, empty_context)]
        assert ids == ["vivo-fibra", "claro-fibra", "vivo-movel", "claro-combo"]

    def test_preserves_catalog_order(self, catalog):
        ctx = ActiveContext(categorias={"fibra"})
        assert [o.id for o in filter_compatible(catalog, ctx)] == ["vivo-fibra", "claro-fibra"]

    def test_empty_and_missing_catalogs(self, empty_context):
        assert filter_compatible([], empty_context) == []
        assert filter_compatible(None, empty_context) == []

    def test_integer_catalog_ids(self, empty_context):
        catalog = ensure_offerings([{"id": 7, "categoria": "fibra"}, {"id": "8", "categoria": "movel"}])
        assert [o.id for o in filter_compatible(catalog, empty_context)] == ["7", "8"]


class TestStrictPreFilter:
    """Incompatible offerings never reach scoring, whatever their signals."""

    def test_strong_signals_cannot_rescue_incompatible_offering(self, catalog_rows):
        ctx = ActiveContext(categorias={"movel"})
        signals = BehavioralSignals(
            planosVisualizados=["claro-fibra"],
            planosComparados=["claro-fibra"],
            planosAdicionadosCarrinho=["claro-fibra"],
            tempoPorCategoria={"fibra": 120_000},
        )
        result = recommend_for_context(catalog_rows, ctx, signals=signals)
        ids = [s.offering.id for s in result.offerings]
        assert "claro-fibra" not in ids
        assert all(s.offering.category == "movel" for s in result.offerings)


class TestBlockingCriteria:
    """Which single selection to drop to get results back."""

    def test_reports_carrier_when_dropping_it_brings_results(self, catalog):
        ctx = ActiveContext(categorias={"movel"}, operadoras={"tim"})
        assert filter_compatible(catalog, ctx) == []
        assert blocking_criteria(catalog, ctx) == ["operadora"]

    def test_reports_only_criteria_that_help(self, catalog):
        # No dedicated-link plan exists, so only dropping the category helps
        ctx = ActiveContext(categorias={"internet-dedicada"}, operadoras={"vivo"})
        assert blocking_criteria(catalog, ctx) == ["categoria"]

    def test_lines_and_fiber(self, catalog):
        ctx = ActiveContext(linhas=10, fibra=True)
        assert filter_compatible(catalog, ctx) == []
        assert blocking_criteria(catalog, ctx) == ["linhas"]

    def test_context_not_modified(self, catalog):
        ctx = ActiveContext(categorias={"internet-dedicada"}, operadoras={"vivo"})
        blocking_criteria(catalog, ctx)
        assert ctx.categories == {"internet-dedicada"}
        assert ctx.carriers == {"vivo"}

    def test_empty_catalog(self):
        assert blocking_criteria([], ActiveContext(operadoras={"vivo"})) == []

    def test_filled_only_when_nothing_is_compatible(self, catalog_rows):
        result = recommend_for_context(catalog_rows, ActiveContext(categorias={"fibra"}))
        assert result.total_compatible == 2
        assert result.blocking_criteria == []
