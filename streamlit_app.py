# File name: streamlit_app.py (run with: streamlit run streamlit_app.py)

import logging

import streamlit as st

from stoich_calc import (
    ActualProduct,
    ReactantInput,
    StoichiometryError,
    calculate_stoichiometry,
    check_balance,
    composition,
    molar_mass,
    parse_equation,
    validate_equation,
)
from stoich_calc import config
from stoich_calc.formatting import format_number, formula_to_unicode, yield_warning

config.configure_logging()
logger = logging.getLogger("stoich_calc.app")

st.set_page_config(page_title="Stoichiometry Calculator", page_icon="⚗️", layout="wide")

# Custom CSS for a clean look
st.markdown("""
<style>
    .main {background-color: #f0f2f6;}
    .stTextInput > label {font-weight: bold;}
    .stButton > button {background-color: #4CAF50; color: white; border-radius: 8px;}
    .result {font-size: 1.2em; font-family: monospace; background-color: #e8f5e8; padding: 10px; border-radius: 5px;}
</style>
""", unsafe_allow_html=True)

MASS = "Mass (g)"
MOLES = "Moles"


def balance_rows(balance):
    return [
        {
            "Element": elem,
            "Reactants": d.reactant_count,
            "Products": d.product_count,
            "Status": "✓" if d.balanced else "✗",
        }
        for elem, d in balance.details.items()
    ]


def show_balance_failure(balance):
    lines = [
        f"• {elem}: {d.reactant_count} in reactants, {d.product_count} in products"
        for elem, d in balance.details.items() if not d.balanced
    ]
    st.error("The equation is NOT balanced. Balance it before continuing.\n\n" + '\n'.join(lines))
    st.dataframe(balance_rows(balance), use_container_width=True, hide_index=True)


def amount_input(label, key):
    col1, col2 = st.columns(2)
    with col1:
        kind = st.selectbox("Quantity type", [MASS, MOLES], key=f"{key}-kind")
    with col2:
        amount = st.number_input(label, min_value=0.0, value=0.0, step=0.1, format="%.4f", key=f"{key}-amount")
    return kind, amount


def reactant_form(parsed):
    reactants = []
    for i, compound in enumerate(parsed.reactants):
        formula = compound.formula
        st.markdown(
            f"**Reactant {i + 1}: {formula_to_unicode(formula)}** "
            f"(molar mass {format_number(molar_mass(formula), config.MOLAR_MASS_DECIMALS)} g/mol)"
        )
        kind, amount = amount_input("Amount", key=f"reactant-{i}")
        purity = st.number_input(
            "Purity (%)", min_value=0.0, max_value=100.0, value=100.0, step=1.0, key=f"reactant-{i}-purity"
        )
        reactants.append((formula, kind, amount, purity))

    st.markdown("**📊 Actual yield (optional)**")
    st.caption("If you know how much product you actually obtained, enter it to get the percent yield.")
    product = st.selectbox(
        "Product", [p.formula for p in parsed.products], format_func=formula_to_unicode, key="product"
    )
    kind, amount = amount_input("Actual amount (leave 0 if not applicable)", key="product")
    return reactants, (product, kind, amount)


def build_inputs(raw_reactants, raw_product):
    reactants = []
    for formula, kind, amount, purity in raw_reactants:
        if amount <= 0:
            raise ValueError(f"Enter a valid amount for {formula}")
        if kind == MASS:
            reactants.append(ReactantInput(formula, mass=amount, purity=purity))
        else:
            reactants.append(ReactantInput(formula, moles=amount, purity=purity))

    actual = None
    formula, kind, amount = raw_product
    if amount > 0:
        if kind == MASS:
            actual = ActualProduct(formula, mass=amount)
        else:
            actual = ActualProduct(formula, moles=amount)
    return reactants, actual


def show_results(result):
    fmt = format_number
    mm = config.MOLAR_MASS_DECIMALS

    st.subheader("📌 Reaction summary")
    col1, col2, col3 = st.columns(3)
    col1.metric("Limiting reagent", formula_to_unicode(result.limiting.formula))
    if result.excess:
        col2.metric("Excess reagent(s)", ", ".join(formula_to_unicode(e.formula) for e in result.excess))
    if result.percent_yield is not None:
        col3.metric("Percent yield", f"{result.percent_yield:.2f}%")
        warning = yield_warning(result.percent_yield)
        if warning:
            st.warning(f"⚠️ {warning}")

    st.subheader("⚗️ Reactants")
    excess_formulas = {e.formula for e in result.excess}
    rows = []
    for r in result.reactants:
        if r.formula == result.limiting.formula:
            role = "LIMITING"
        elif r.formula in excess_formulas:
            role = "EXCESS"
        else:
            role = "-"
        rows.append({
            "Reactant": formula_to_unicode(r.formula),
            "Molar mass (g/mol)": fmt(molar_mass(r.formula), mm),
            "Initial amount (g)": fmt(r.initial_mass),
            "Effective moles": fmt(r.effective_moles),
            "Role": role,
        })
    st.dataframe(rows, use_container_width=True, hide_index=True)

    if result.excess:
        st.subheader("📊 Excess reagents")
        st.dataframe([
            {
                "Reactant": formula_to_unicode(e.formula),
                "Moles used": fmt(e.moles_used),
                "Moles left": fmt(e.moles_remaining),
                "Mass left (g)": fmt(e.mass_remaining),
            }
            for e in result.excess
        ], use_container_width=True, hide_index=True)

    st.subheader("🧪 Products (theoretical yield)")
    st.dataframe([
        {
            "Product": formula_to_unicode(p.formula),
            "Molar mass (g/mol)": fmt(p.molar_mass, mm),
            "Theoretical moles": fmt(p.moles_theoretical),
            "Theoretical mass (g)": fmt(p.mass_theoretical),
        }
        for p in result.products
    ], use_container_width=True, hide_index=True)

    impure = [r for r in result.reactants if r.purity < 100]
    if impure:
        st.subheader("🔍 Effect of purity")
        for r in impure:
            effective_mass = r.initial_mass * (r.purity / 100)
            st.markdown(
                f"• **{formula_to_unicode(r.formula)}**: purity {r.purity:g}% → of {fmt(r.initial_mass)} g, "
                f"only {fmt(effective_mass)} g is pure reagent."
            )


tab1, tab2, tab3 = st.tabs(["🔬 Stoichiometry", "⚖️ Balance Check", "🧮 Molar Mass"])

with tab1:
    st.markdown("Enter a **balanced** equation (use + between compounds and ->, → or = as the arrow).")
    equation = st.text_input(
        "Chemical equation",
        value=config.DEFAULT_EQUATION,
        help="e.g., 2H2 + O2 -> 2H2O",
    ).strip()

    if not equation:
        st.info("Please enter a chemical equation.")
    else:
        validation = validate_equation(equation)
        if not validation.valid:
            st.error(validation.error)
        else:
            balance = check_balance(equation)
            if not balance.balanced:
                show_balance_failure(balance)
            else:
                st.success("Valid and balanced equation! Enter the reactant data.")
                parsed = parse_equation(equation)
                with st.form("reactants"):
                    raw_reactants, raw_product = reactant_form(parsed)
                    submitted = st.form_submit_button("🔬 Calculate Stoichiometry", type="primary")

                if submitted:
                    try:
                        reactants, actual = build_inputs(raw_reactants, raw_product)
                        result = calculate_stoichiometry(equation, reactants, actual)
                    except (StoichiometryError, ValueError) as e:
                        logger.info("Calculation rejected: %s", e)
                        st.error(str(e))
                    else:
                        show_results(result)

with tab2:
    st.markdown("Check atom counts on both sides of an equation.")
    balance_input = st.text_input("Equation to check", value="H2 + O2 -> H2O", key="balance-input")

    if st.button("Check Balance", type="primary"):
        try:
            balance = check_balance(balance_input)
        except StoichiometryError as e:
            st.error(str(e))
        else:
            if balance.balanced:
                st.success("Balanced!")
            else:
                st.error("Not balanced: " + ", ".join(balance.unbalanced_elements()))
            st.dataframe(balance_rows(balance), use_container_width=True, hide_index=True)

with tab3:
    formula_input = st.text_input("Formula", value="Ca(OH)2", help="e.g., H2O, Al2(SO4)3")

    if st.button("Calculate Molar Mass", type="primary"):
        try:
            mass = molar_mass(formula_input)
            percents = composition(formula_input)
        except StoichiometryError as e:
            st.error(str(e))
        else:
            st.markdown(
                f"<div class='result'>{formula_to_unicode(formula_input)}: "
                f"{format_number(mass, config.MOLAR_MASS_DECIMALS)} g/mol</div>",
                unsafe_allow_html=True,
            )
            st.dataframe(
                [{"Element": elem, "Mass %": format_number(pct, 2)} for elem, pct in percents.items()],
                use_container_width=True,
                hide_index=True,
            )

# Examples sidebar
with st.sidebar:
    st.header("Examples")
    st.code("2H2 + O2 -> 2H2O", language="text")
    st.code("N2 + 3H2 -> 2NH3", language="text")
    st.code("CH4 + 2O2 -> CO2 + 2H2O", language="text")
    st.code("Fe2O3 + 3CO -> 2Fe + 3CO2", language="text")
    st.code("Ca(OH)2 + 2HCl -> CaCl2 + 2H2O", language="text")
    st.markdown("---")
    st.caption("Equations must already be balanced; this tool only verifies.")

# Footer
st.markdown("---")
st.caption("Deployed with Streamlit • Molar masses from IUPAC standard atomic weights")
