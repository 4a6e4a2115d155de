import pytest

from gopatterns.chain import Cashier, Doctor, Medical, Patient, Reception, main


def _chain():
    return Reception(Doctor(Medical(Cashier())))


def test_first_visit_sets_flags(capsys):
    patient = Patient(name="abc")
    _chain().execute(patient)
    assert patient.registration_done
    assert patient.doctor_check_up_done
    assert patient.medicine_done
    assert not patient.payment_done
    assert capsys.readouterr().out.splitlines() == [
        "Reception registering patient",
        "Doctor checking patient",
        "Medical giving medicine to patient",
        "Cashier getting money from patient patient",
    ]


def test_second_visit_skips_done_steps(capsys):
    patient = Patient(name="abc")
    chain = _chain()
    chain.execute(patient)
    capsys.readouterr()
    chain.execute(patient)
    assert capsys.readouterr().out.splitlines() == [
        "Patient registration already done",
        "Doctor checkup already done",
        "Medicine already given to patient",
        "Cashier getting money from patient patient",
    ]


def test_cashier_reports_payment(capsys):
    Cashier().execute(Patient(name="abc", payment_done=True))
    assert capsys.readouterr().out.splitlines()[0] == "Payment Done"


def test_missing_next_department_raises():
    patient = Patient(name="abc")
    with pytest.raises(RuntimeError):
        Doctor().execute(patient)
    assert patient.doctor_check_up_done


def test_main_output(capsys):
    main()
    assert capsys.readouterr().out.splitlines()[0] == "Reception registering patient"