from pathlib import Path
from decimal import Decimal
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side

from core.services.finance.models import FinanceDashboard


def _cell_value(value):
    # Money and ratios are written as floats rounded to 2 places.
    if isinstance(value, Decimal):
        return float(round(value, 2))
    if isinstance(value, bool):
        return "Yes" if value else "No"
    return value


class FinanceExcelRenderer:
    def render(self, dashboard: FinanceDashboard, output_path: Path) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        m = dashboard.metrics
        wb = Workbook()

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")

        def header_row(ws, headers):
            for col_index, h in enumerate(headers, start=1):
                cell = ws.cell(row=1, column=col_index, value=h)
                cell.font = header_font
                cell.alignment = center
                cell.fill = header_fill
                cell.border = thin_border

        # ---------------- Finance Summary ----------------
        ws = wb.active
        ws.title = "Finance Summary"

        title = dashboard.project_name or m.project_id
        ws["A1"] = f"Financial Summary - {title}"
        ws["A1"].font = title_font

        row = 3

        def kv(key, value):
            nonlocal row
            ws[f"A{row}"] = key
            ws[f"B{row}"] = _cell_value(value)
            ws[f"A{row}"].font = header_font
            ws[f"A{row}"].border = thin_border
            ws[f"B{row}"].border = thin_border
            row += 1

        kv("Project ID", m.project_id)
        kv("Project code", dashboard.project_code)
        kv("Currency", m.currency)
        kv("Percent complete (%)", m.percent_complete)

        row += 1
        kv("Contract value", m.total_contract_value)
        kv("Variation orders", m.vo_total)
        kv("Net revenue", m.net_revenue)
        kv("Profit target", m.profit_target_amount)
        kv("Production budget", m.production_budget)

        row += 1
        kv("Invoiced", m.total_invoiced)
        kv("Collected", m.total_collected)
        kv("Pending invoicing", dashboard.collection.pending_invoicing)
        kv("Outstanding", dashboard.collection.outstanding)
        kv("Financial completion (%)", m.financial_completion_rate)

        row += 1
        kv("Duration (days)", m.duration_days)
        kv("Stoppage days", m.stoppage_days)
        kv("Stoppage loss", m.stoppage_loss)

        row += 1
        kv("Total burn", m.total_burn)
        kv("BAC", m.BAC)
        kv("EV", m.EV)
        kv("CPI", m.CPI)
        kv("Under budget", m.is_under_budget)
        kv("Current margin (%)", m.current_margin)
        kv("Budget utilized (%)", m.budget_utilized)
        kv("Remaining budget", dashboard.budget.remaining_budget)
        kv("Planned profit", dashboard.budget.planned_profit)

        if m.notes:
            row += 1
            for note in m.notes:
                kv("Note", note)

        ws.column_dimensions["A"].width = 30
        ws.column_dimensions["B"].width = 25

        # ---------------- Cost Distribution ----------------
        ws_cost = wb.create_sheet("Cost Distribution")
        header_row(ws_cost, ["Cost bucket", f"Amount ({m.currency})"])
        for r, dist in enumerate(dashboard.cost_distribution, start=2):
            ws_cost.cell(r, 1, dist.label).border = thin_border
            ws_cost.cell(r, 2, _cell_value(dist.amount)).border = thin_border
        ws_cost.column_dimensions["A"].width = 24
        ws_cost.column_dimensions["B"].width = 18

        # ---------------- Variance ----------------
        ws_v = wb.create_sheet("Variance")
        header_row(ws_v, ["Measure", "Actual", "Planned", "Fill (%)", "Over plan"])
        for r, bar in enumerate(dashboard.variance, start=2):
            values = [bar.label, bar.actual, bar.planned, bar.fill_percent, bar.is_over]
            for c, v in enumerate(values, start=1):
                ws_v.cell(r, c, _cell_value(v)).border = thin_border
        ws_v.column_dimensions["A"].width = 20
        for col_letter in ("B", "C", "D", "E"):
            ws_v.column_dimensions[col_letter].width = 15

        # ---------------- Labor Budget ----------------
        ws_lb = wb.create_sheet("Labor Budget")
        header_row(ws_lb, ["Staff", "Hours", "Loaded rate", "Estimated cost"])
        for r, line in enumerate(dashboard.labor_budget, start=2):
            values = [
                line.staff_name or "(removed staff)",
                line.hours,
                line.loaded_rate,
                line.estimated_cost,
            ]
            for c, v in enumerate(values, start=1):
                ws_lb.cell(r, c, _cell_value(v)).border = thin_border
        ws_lb.column_dimensions["A"].width = 28
        for col_letter in ("B", "C", "D"):
            ws_lb.column_dimensions[col_letter].width = 16

        wb.save(output_path)
        return output_path
