"""Сборщик промптов по уровням отчета"""
import json
import logging
from typing import Dict, List, Optional

from pydantic import BaseModel

from frequency_calculator import (
    InvalidTier, calculate_extended_profile, calculate_profile,
    detect_amplifications, detect_tensions,
)
from frequency_calculator.dates import format_date
from frequency_calculator.models import ExtendedProfile, Profile, ProfileMetadata

from .matrix import MatrixTable, default_tables
from .prompts import render_blueprint_prompt, render_insight_prompt

logger = logging.getLogger(__name__)

TIERS = ('insight', 'blueprint')


class AssembledPrompts(BaseModel):
    insight: Optional[str] = None
    blueprint: Optional[str] = None


class ProfileData(BaseModel):
    """Плоские данные профиля для подстановки в шаблоны"""
    full_name: str
    first_name: str
    dob_display: str
    lp_num: int
    lp_archetype: str
    bd_display: str
    bd_talent: str
    bd_compound: int
    bd_reduced: int
    expr_num: int
    expr_archetype: str
    su_num: int
    pn_num: int
    w_sign: str
    w_cusp: Optional[str] = None
    w_display: str
    w_elem: str
    w_mod: str
    c_animal: str
    c_elem: str
    c_pol: str
    c_display: str
    karmic: Optional[str] = None
    master_positions: List[str]
    tensions: List[str]
    amplifications: List[str]
    lp_matrix: str
    bd_matrix: str
    expr_matrix: str
    western_matrix: str
    chinese_matrix: str
    karmic_matrix: str
    tension_descriptions: List[str]
    amp_descriptions: List[str]
    priority_text: str


def first_token(full_name: str) -> str:
    """Первое слово имени как его ввели"""
    parts = full_name.strip().split()
    return parts[0] if parts else ''


def first_name_of(full_name: str) -> str:
    return first_token(full_name).capitalize()


def master_positions_of(profile: Profile) -> List[str]:
    positions = []
    if profile.life_path.is_master:
        positions.append(f"Life Path {profile.life_path.number}")
    if profile.birthday_number.is_master:
        positions.append(f"Birthday {profile.birthday_number.compound}")
    if profile.expression.is_master:
        positions.append(f"Expression {profile.expression.number}")
    return positions


def build_teaser(profile: Profile, tensions: List[str], amplifications: List[str]) -> Dict[str, object]:
    """Тизер для бесплатного калькулятора"""
    first_name = first_token(profile.input.name)

    if tensions:
        plural = 's' if len(tensions) > 1 else ''
        body = (
            f"Your frequency profile contains {len(tensions)} active tension{plural} — "
            f"conflicting signals that most founders never decode. "
            f"This is where your biggest advantage is hiding."
        )
    else:
        body = (
            "Your frequency channels are largely aligned — a rare configuration "
            "that gives you unusual clarity in decision-making."
        )

    if profile.life_path.is_master or profile.expression.is_master:
        body += (
            " You carry a Master Number frequency — only ~11% of the population does. "
            "This amplifies everything."
        )

    return {
        'headline': (
            f"{first_name}, your founder frequency is "
            f"{profile.life_path.number}-{profile.expression.number}-{profile.western_zodiac.sign}"
        ),
        'body': body,
        'tension_count': len(tensions),
        'amplification_count': len(amplifications),
        'has_master_number': bool(master_positions_of(profile)),
        'has_karmic_debt': profile.birthday_number.karmic_debt is not None,
    }


class PromptAssembler:
    """Собирает промпты insight и blueprint из профиля и таблиц"""

    def __init__(self, matrix: Optional[MatrixTable] = None, matrix_ext: Optional[MatrixTable] = None):
        if matrix is None or matrix_ext is None:
            default_matrix, default_ext = default_tables()
            if matrix is None:
                matrix = default_matrix
            if matrix_ext is None:
                matrix_ext = default_ext
        self.matrix = matrix
        self.matrix_ext = matrix_ext

    # ── Таблица интерпретаций ───────────────────────────────────────

    def _birthday_entry(self, compound: int, reduced: int) -> str:
        base = self.matrix.section('birthday_number', reduced)
        compound_note = self.matrix.text('birthday_compound', compound)
        parts = []
        if base.get('talent'):
            parts.append(f"Talent: {base['talent']}")
            parts.append(f"Business Gift: {base.get('business_gift', 'N/A')}")
        if compound_note:
            parts.append(f"Compound {compound} Note: {compound_note}")
        return '\n'.join(parts) if parts else f"Birthday {compound}: No entry."

    def _chinese_entry(self, animal: str, element: str) -> str:
        parts = []
        if self.matrix.section('chinese_zodiac', 'animals', animal):
            parts.append(f"ANIMAL ({animal}):\n{self.matrix.dump('chinese_zodiac', 'animals', animal)}")
        if self.matrix.section('chinese_zodiac', 'elements', element):
            parts.append(f"ELEMENT ({element}):\n{self.matrix.dump('chinese_zodiac', 'elements', element)}")
        return '\n\n'.join(parts)

    def _pattern_descriptions(self, kind: str, names: List[str]) -> List[str]:
        patterns = self.matrix.section('combination_rules', kind)
        return [f"- {name}: {patterns[name]}" for name in names if patterns.get(name)]

    def _priority_text(self) -> str:
        priority = self.matrix.section('combination_rules', 'priority_hierarchy')
        return '\n'.join(f"  {channel}: {' > '.join(signals)}" for channel, signals in priority.items())

    # ── Расширенная таблица (только blueprint) ───────────────────────

    def partnership_data(self, lp_num: int) -> str:
        if not self.matrix_ext.section('partnership_compatibility', lp_num):
            return "No partnership data for this Life Path."
        return self.matrix_ext.dump('partnership_compatibility', lp_num)

    def action_plan(self, lp_num: int, expr_num: int, western: str, animal: str) -> str:
        """Архетип плана на 90 дней с наибольшим счетом совпадений"""
        plans = self.matrix_ext.section('action_plan_archetypes')
        best_key = None
        best_score = -1

        for key, plan in plans.items():
            if key.startswith('_') or not isinstance(plan, dict) or not plan.get('applies_to'):
                continue
            applies = plan['applies_to']
            score = 0
            if f"LP{lp_num}" in applies:
                score += 3
            if f"Expr{expr_num}" in applies:
                score += 2
            if western in applies:
                score += 1
            if animal in applies:
                score += 1
            if f"LP{lp_num} + Expr{expr_num}" in applies:
                score += 5
            if f"LP{lp_num} + {western}" in applies:
                score += 4
            # При равенстве остается первый по порядку таблицы
            if score > best_score:
                best_key, best_score = key, score

        if best_key is None:
            return "No matching action plan archetype."

        plan = plans[best_key]
        return (
            f"ARCHETYPE: {best_key}\n"
            f"Applies to: {plan['applies_to']}\n"
            f"{json.dumps(plan, indent=2, ensure_ascii=False)}"
        )

    def personal_year_data(self, py_num: int) -> str:
        return self.matrix_ext.dump('personal_year_business', py_num)

    def quarterly_data(self, profile: ExtendedProfile) -> str:
        forecast = profile.quarterly_forecast
        py = forecast.personal_year
        theme = self.matrix_ext.text('personal_year_business', py, 'theme', default='N/A')
        lines = [f"PERSONAL YEAR: {py} — {theme}"]

        for quarter in forecast.quarters:
            lines.append(
                f"\nQ{quarter.quarter} (Months {quarter.months[0]}-{quarter.months[-1]}), "
                f"Dominant Energy: {quarter.dominant_energy}"
            )
            for month, energy in zip(quarter.months, quarter.energies):
                month_text = self.matrix_ext.text('personal_month_business', energy)
                lines.append(f"  Month {month} (PM{energy}): {month_text}")

        return '\n'.join(lines)

    # ── Сборка ──────────────────────────────────────────────────────

    def extract_profile_data(self, profile: Profile) -> ProfileData:
        """Собирает данные профиля и записи таблиц в один объект"""
        lp_num = profile.life_path.number
        expr_num = profile.expression.number
        bd = profile.birthday_number
        western = profile.western_zodiac
        chinese = profile.chinese_zodiac

        tensions = detect_tensions(profile)
        amplifications = detect_amplifications(profile)
        karmic = bd.karmic_debt

        return ProfileData(
            full_name=profile.input.name,
            first_name=first_name_of(profile.input.name),
            dob_display=format_date(profile.input.parsed),
            lp_num=lp_num,
            lp_archetype=self.matrix.text('life_path', lp_num, 'archetype', default=f"LP {lp_num}"),
            bd_display=bd.display,
            bd_talent=self.matrix.text('birthday_number', bd.reduced, 'talent'),
            bd_compound=bd.compound,
            bd_reduced=bd.reduced,
            expr_num=expr_num,
            # Архетипы выражения берутся из раздела life_path
            expr_archetype=self.matrix.text('life_path', expr_num, 'archetype', default=f"Expr {expr_num}"),
            su_num=profile.soul_urge.number,
            pn_num=profile.personality.number,
            w_sign=western.sign,
            w_cusp=western.cusp,
            w_display=western.display,
            w_elem=western.element,
            w_mod=western.modality,
            c_animal=chinese.animal,
            c_elem=chinese.element,
            c_pol=chinese.polarity,
            c_display=chinese.display,
            karmic=karmic,
            master_positions=master_positions_of(profile),
            tensions=tensions,
            amplifications=amplifications,
            lp_matrix=self.matrix.dump('life_path', lp_num),
            bd_matrix=self._birthday_entry(bd.compound, bd.reduced),
            expr_matrix=self.matrix.dump('life_path', expr_num),
            western_matrix=self.matrix.dump('western_zodiac', western.sign),
            chinese_matrix=self._chinese_entry(chinese.animal, chinese.element),
            karmic_matrix=self.matrix.text('karmic_debt_business_impact', karmic) if karmic else '',
            tension_descriptions=self._pattern_descriptions('tension_patterns', tensions),
            amp_descriptions=self._pattern_descriptions('amplification_patterns', amplifications),
            priority_text=self._priority_text(),
        )

    def assemble_insight_prompt(self, full_name: str, dob: str) -> str:
        profile = calculate_profile(full_name, dob)
        return render_insight_prompt(self.extract_profile_data(profile))

    def assemble_blueprint_prompt(self, full_name: str, dob: str,
                                  target_year: Optional[int] = None) -> str:
        profile = calculate_extended_profile(full_name, dob, target_year)
        data = self.extract_profile_data(profile)

        premium = {
            'partnership': self.partnership_data(data.lp_num),
            'action_plan': self.action_plan(data.lp_num, data.expr_num, data.w_sign, data.c_animal),
            'personal_year_data': self.personal_year_data(profile.personal_year.number),
            'quarterly': self.quarterly_data(profile),
            'personal_year': profile.personal_year.number,
            'personal_month': profile.personal_month.number,
            'forecast_year': profile.personal_year.year,
        }
        return render_blueprint_prompt(data, premium)

    def assemble_prompt(self, full_name: str, dob: str, tier: str) -> str:
        """Промпт одного уровня"""
        if tier == 'insight':
            return self.assemble_insight_prompt(full_name, dob)
        if tier == 'blueprint':
            return self.assemble_blueprint_prompt(full_name, dob)
        raise InvalidTier(tier)

    def assemble(self, full_name: str, dob: str, tier: str = 'both') -> AssembledPrompts:
        """Промпты для одного уровня или обоих ('both')"""
        if tier not in TIERS + ('both',):
            raise InvalidTier(tier)

        result = AssembledPrompts()
        if tier in ('insight', 'both'):
            result.insight = self.assemble_insight_prompt(full_name, dob)
        if tier in ('blueprint', 'both'):
            result.blueprint = self.assemble_blueprint_prompt(full_name, dob)
        return result

    def get_metadata(self, full_name: str, dob: str,
                     target_year: Optional[int] = None) -> ProfileMetadata:
        profile = calculate_extended_profile(full_name, dob, target_year)
        return ProfileMetadata(
            summary=profile.summary,
            tensions=detect_tensions(profile),
            amplifications=detect_amplifications(profile),
            personal_year=profile.personal_year,
            quarterly_forecast=profile.quarterly_forecast,
        )
